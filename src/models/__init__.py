"""Domain models for the ledger."""

from .account import Account
from .bank import Bank
from .transfer import Transfer
from .money import to_decimal, to_plain_string
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "Bank",
    "Transfer",
    "to_decimal",
    "to_plain_string",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
]
