"""Account model for the ledger."""

import logging
from dataclasses import dataclass, field

from bank_ledger.models.enums import AccountType
from bank_ledger.models.transaction import Deposit, Transaction, Withdrawal

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """Single ledger entry.

    Accounts start empty and active. Deposits and withdrawals only apply
    while the account is active. A withdrawal never takes the balance
    below zero; deposits are not validated.
    """

    account_type: AccountType
    _balance: float = 0.0
    _transactions: list[Transaction] = field(default_factory=list)
    is_active: bool = True

    @property
    def balance(self) -> float:
        """Current balance."""
        return self._balance

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """History in insertion order."""
        return tuple(self._transactions)

    def deposit(self, amount: float) -> None:
        """Credit ``amount``. Inactive accounts ignore the deposit."""
        if not self.is_active:
            logger.warning("Account is inactive, deposit of %s ignored", amount)
            return
        self._balance += amount
        self._transactions.append(Deposit(amount))

    def withdraw(self, amount: float) -> bool:
        """Debit ``amount`` if the account is active and holds enough funds.

        Returns
        -------
        bool
            True when the withdrawal was applied.
        """
        if not self.is_active:
            logger.warning("Account is inactive, withdrawal of %s refused", amount)
            return False
        if amount > self._balance:
            logger.info("Insufficient funds: requested %s, available %s", amount, self._balance)
            return False
        self._balance -= amount
        self._transactions.append(Withdrawal(amount))
        return True

    def record(self, transaction: Transaction) -> None:
        """Append a record without touching the balance."""
        self._transactions.append(transaction)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False
