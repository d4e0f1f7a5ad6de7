"""Configuration management for the ledger."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Configuration settings for the ledger.

    Every value has a default; the environment (or a .env file) overrides it.
    """

    bank_name: str = 'Bank'

    # Logging Configuration
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls, env_file: Optional[str] = None) -> 'Settings':
        """Load settings from environment variables.

        Args:
            env_file: Optional path of a .env file; the default lookup is used when omitted.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If LEDGER_LOG_LEVEL is not a known level name.
        """
        load_dotenv(env_file)

        return cls(
            bank_name=os.getenv('LEDGER_BANK_NAME', cls.bank_name),
            log_level=os.getenv('LEDGER_LOG_LEVEL', cls.log_level),
            log_file=os.getenv('LEDGER_LOG_FILE') or None,
        )
