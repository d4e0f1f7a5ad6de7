"""Custom exceptions for the ledger."""

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds"


class BankError(Exception):
    """Base exception for all ledger errors."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a debit exceeds the account balance."""

    def __init__(self, message: str = INSUFFICIENT_FUNDS_MESSAGE):
        super().__init__(message)


class InvalidAmountError(BankError):
    """Raised when an amount is not a positive exact decimal."""
    pass
