"""Tests for configuration management."""
import logging
import os

import pytest

from config.logging_config import setup_logging
from config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    names = ('LEDGER_BANK_NAME', 'LEDGER_LOG_LEVEL', 'LEDGER_LOG_FILE')
    for name in names:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # load_dotenv writes straight to os.environ
    for name in names:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_settings_defaults():
    """Test that all default values are correctly set."""
    settings = Settings()

    assert settings.bank_name == 'Bank'
    assert settings.log_level == 'INFO'
    assert settings.log_file is None
    assert settings.log_level_value == logging.INFO


def test_settings_load(clean_env, tmp_path):
    """Test loading Settings from environment variables."""
    clean_env.setenv('LEDGER_BANK_NAME', 'Banco de España')
    clean_env.setenv('LEDGER_LOG_LEVEL', 'debug')

    settings = Settings.load(str(tmp_path / 'missing.env'))

    assert settings.bank_name == 'Banco de España'
    assert settings.log_level == 'DEBUG'
    assert settings.log_file is None


def test_settings_load_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('LEDGER_BANK_NAME=From File\nLEDGER_LOG_FILE=ledger.log\n', encoding='utf-8')

    settings = Settings.load(str(env_file))

    assert settings.bank_name == 'From File'
    assert settings.log_file == 'ledger.log'


def test_environment_overrides_env_file(clean_env, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('LEDGER_BANK_NAME=From File\n', encoding='utf-8')
    clean_env.setenv('LEDGER_BANK_NAME', 'From Environment')

    assert Settings.load(str(env_file)).bank_name == 'From Environment'


def test_settings_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        Settings(log_level='LOUD')


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / 'ledger.log'
    logger = setup_logging(Settings(log_level='DEBUG', log_file=str(log_file)))

    logging.getLogger('src.models.bank').info('hello ledger')
    for handler in logger.handlers:
        handler.flush()

    assert logger is logging.getLogger()
    assert logger.level == logging.DEBUG
    content = log_file.read_text(encoding='utf-8')
    assert ':INFO:src.models.bank: hello ledger' in content


def test_setup_logging_replaces_previous_handler(tmp_path):
    logger = setup_logging(Settings(log_file=str(tmp_path / 'first.log')))
    before = len(logger.handlers)

    setup_logging(Settings())

    assert len(logger.handlers) == before
    assert isinstance(logger.handlers[-1], logging.StreamHandler)
    assert not isinstance(logger.handlers[-1], logging.FileHandler)
