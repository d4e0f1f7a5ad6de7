"""Account data model."""

from __future__ import annotations

import logging
import weakref
from decimal import Decimal
from typing import TYPE_CHECKING

from src.models.exceptions import InsufficientFundsError
from src.models.money import (
    exact_add,
    exact_subtract,
    to_decimal,
    to_plain_string,
    to_positive_decimal,
)

if TYPE_CHECKING:
    from src.models.bank import Bank

logger = logging.getLogger(__name__)


class Account:
    """
    Represents a bank account holding an exact decimal balance.

    Two accounts compare equal when their owner and balance match, whether or
    not they are the same object. Since the balance changes, accounts are not
    hashable.
    """

    __hash__ = None

    def __init__(self, owner: str, balance):
        """
        Initialize the account.

        Args:
            owner: The account holder's name
            balance: Starting balance (Decimal, int or numeric string); may be negative
        """
        self._owner = owner
        self._balance = to_decimal(balance)
        self._bank_ref: weakref.ref | None = None

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def plain_balance(self) -> str:
        """The balance as a plain decimal string, e.g. ``"900.1234"``."""
        return to_plain_string(self._balance)

    @property
    def bank(self) -> Bank | None:
        """The bank this account is registered with, if any."""
        if self._bank_ref is None:
            return None
        return self._bank_ref()

    def _attach(self, bank: Bank) -> None:
        self._bank_ref = weakref.ref(bank)

    def debit(self, amount) -> None:
        """
        Take money out of the account.

        Args:
            amount: The amount to debit (must be positive)

        Raises:
            InvalidAmountError: If the amount is not a positive decimal, or the
                new balance cannot be represented exactly
            InsufficientFundsError: If the amount exceeds the balance; the
                balance is left untouched
        """
        amount = to_positive_decimal(amount)
        if self._balance < amount:
            logger.info(
                "Debit of %s rejected for %s: balance is %s",
                amount, self._owner, self._balance,
            )
            raise InsufficientFundsError()
        self._balance = exact_subtract(self._balance, amount)
        logger.debug("Debited %s from %s", amount, self._owner)

    def credit(self, amount) -> None:
        """
        Put money into the account.

        Raises:
            InvalidAmountError: If the amount is not a positive decimal, or the
                new balance cannot be represented exactly
        """
        amount = to_positive_decimal(amount)
        self._balance = exact_add(self._balance, amount)
        logger.debug("Credited %s to %s", amount, self._owner)

    def set_balance(self, value) -> None:
        """
        Overwrite the balance directly.

        This skips the debit/credit rules entirely. It exists for test setup
        and manual corrections, not as a business operation.
        """
        value = to_decimal(value)
        logger.warning(
            "Balance of %s overwritten: %s -> %s",
            self._owner, self._balance, value,
        )
        self._balance = value

    def _restore(self, balance: Decimal) -> None:
        self._balance = balance

    def __int__(self) -> int:
        return int(self._balance)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._owner == other._owner and self._balance == other._balance

    def __repr__(self) -> str:
        return f"Account(owner={self._owner!r}, balance={self._balance!r})"
