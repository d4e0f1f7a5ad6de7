"""Transfer record model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Transfer:
    """Represents a completed transfer between two accounts."""

    source: str
    target: str
    amount: Decimal
    time: datetime
    memo: str
    status: str

    @classmethod
    def create(
        cls,
        source: str,
        target: str,
        amount: Decimal,
        memo: str = "",
    ) -> "Transfer":
        """
        Create a completed transfer with current timestamp.

        Args:
            source: Owner of the debited account
            target: Owner of the credited account
            amount: The transferred amount
            memo: Transfer memo/note

        Returns:
            A new Transfer with status='done' and current time
        """
        return cls(
            source=source,
            target=target,
            amount=amount,
            time=datetime.now(),
            memo=memo,
            status="done",
        )
