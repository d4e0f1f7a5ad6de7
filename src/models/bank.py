"""Bank aggregate: account registration and transfers."""

import logging
from decimal import Decimal

from tabulate import tabulate

from src.models.account import Account
from src.models.exceptions import InvalidAmountError
from src.models.money import exact_add, to_plain_string, to_positive_decimal
from src.models.transfer import Transfer

logger = logging.getLogger(__name__)


class Bank:
    """
    A named collection of accounts.

    The bank references its accounts but does not own them: an account can
    live and be used without ever being registered.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._accounts: list[Account] = []
        self._transfers: list[Transfer] = []

    @property
    def accounts(self) -> tuple[Account, ...]:
        """Registered accounts, in registration order."""
        return tuple(self._accounts)

    @property
    def transfers(self) -> tuple[Transfer, ...]:
        """Completed transfers, oldest first."""
        return tuple(self._transfers)

    def add_account(self, account: Account) -> None:
        """
        Register an account and point its back-reference at this bank.

        An account registered with another bank is moved out of that bank.
        Registering the same account twice lists it twice.
        """
        previous = account.bank
        if previous is not None and previous is not self:
            previous._release(account)
        self._accounts.append(account)
        account._attach(self)
        logger.debug("Registered account of %s with %s", account.owner, self.name)

    def _release(self, account: Account) -> None:
        self._accounts = [existing for existing in self._accounts if existing is not account]

    def find_account(self, owner: str) -> Account | None:
        """Return the first registered account held by owner, or None."""
        for account in self._accounts:
            if account.owner == owner:
                return account
        return None

    def total_balance(self) -> Decimal:
        """Exact sum of all registered balances."""
        total = Decimal(0)
        for account in self._accounts:
            total = exact_add(total, account.balance)
        return total

    def transfer(self, source: Account, target: Account, amount, memo: str = "") -> Transfer:
        """
        Move money from one account to another.

        The source is debited first. When the debit fails nothing has changed
        on either account and the error propagates, so the target is never
        credited. If the credit fails the debit is undone. Neither account
        has to be registered with this bank, and source may be target.

        Args:
            source: The account to debit
            target: The account to credit
            amount: The amount to transfer (must be positive)
            memo: Transfer memo/note

        Returns:
            The recorded Transfer

        Raises:
            InvalidAmountError: If the amount is not a positive decimal, or a
                new balance cannot be represented exactly
            InsufficientFundsError: If the source cannot cover the amount
        """
        amount = to_positive_decimal(amount)

        before = source.balance
        source.debit(amount)
        try:
            target.credit(amount)
        except InvalidAmountError:
            source._restore(before)
            logger.info("%s: credit to %s failed, debit of %s undone", self.name, target.owner, amount)
            raise

        transfer = Transfer.create(
            source=source.owner,
            target=target.owner,
            amount=amount,
            memo=memo,
        )
        self._transfers.append(transfer)
        logger.info(
            "%s: transferred %s from %s to %s",
            self.name, amount, source.owner, target.owner,
        )
        return transfer

    def statement(self) -> str:
        """Render registered accounts and their balances as a text table."""
        rows = [[account.owner, account.plain_balance] for account in self._accounts]
        rows.append(["Total", to_plain_string(self.total_balance())])
        return tabulate(
            rows,
            headers=["Owner", "Balance"],
            stralign='right',
            disable_numparse=True,
        )
