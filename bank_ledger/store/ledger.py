"""Ledger of accounts keyed by identifier."""

import logging
from dataclasses import dataclass, field

from bank_ledger.config import LedgerConfig
from bank_ledger.models import Account, AccountType, Transaction, Transfer

logger = logging.getLogger(__name__)


@dataclass
class Ledger:
    """In-memory store for accounts and their histories.

    Lookups by an unknown identifier never raise: boolean operations
    return False and queries return None, with no state changed.
    """

    config: LedgerConfig = field(default_factory=LedgerConfig)
    accounts: dict[str, Account] = field(default_factory=dict)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self.accounts

    def __len__(self) -> int:
        return len(self.accounts)

    def create_account(self, account_id: str, account_type: AccountType) -> bool:
        """Open an empty, active account under ``account_id``.

        An existing account with the same identifier is replaced, history
        included, unless ``config.reject_duplicates`` is set, in which case
        the call returns False and the existing account is kept.
        """
        if account_id in self.accounts:
            if self.config.reject_duplicates:
                logger.info("Account %s already exists, create refused", account_id)
                return False
            logger.warning("Account %s already exists and is being replaced", account_id)

        self.accounts[account_id] = Account(account_type=AccountType(account_type))
        logger.debug("Created %s account %s", account_type, account_id)
        return True

    def get_account(self, account_id: str) -> Account | None:
        """Get an account by identifier."""
        return self.accounts.get(account_id)

    def deposit(self, account_id: str, amount: float) -> bool:
        """Deposit into an account.

        Returns True whenever the account exists, including when it is
        inactive and the deposit was dropped.
        """
        account = self.accounts.get(account_id)
        if account is None:
            logger.debug("Deposit to unknown account %s", account_id)
            return False
        account.deposit(amount)
        return True

    def withdraw(self, account_id: str, amount: float) -> bool:
        """Withdraw from an account; False if unknown, inactive or short of funds."""
        account = self.accounts.get(account_id)
        if account is None:
            logger.debug("Withdrawal from unknown account %s", account_id)
            return False
        return account.withdraw(amount)

    def balance(self, account_id: str) -> float | None:
        account = self.accounts.get(account_id)
        return account.balance if account is not None else None

    def get_account_type(self, account_id: str) -> AccountType | None:
        account = self.accounts.get(account_id)
        return account.account_type if account is not None else None

    def get_transactions(self, account_id: str) -> tuple[Transaction, ...] | None:
        """Get the history of an account in insertion order."""
        account = self.accounts.get(account_id)
        return account.transactions if account is not None else None

    def activate_account(self, account_id: str) -> bool:
        account = self.accounts.get(account_id)
        if account is None:
            return False
        account.activate()
        return True

    def deactivate_account(self, account_id: str) -> bool:
        account = self.accounts.get(account_id)
        if account is None:
            return False
        account.deactivate()
        return True

    def transfer(self, from_account: str, to_account: str, amount: float) -> bool:
        """Move ``amount`` from one account to another.

        Both accounts must exist and the source withdrawal must succeed,
        otherwise nothing changes and False is returned. Once the source
        is debited the destination deposit follows and both histories get
        a Transfer record naming the other side. An inactive destination
        drops the deposit but the transfer still reports True.
        """
        source = self.accounts.get(from_account)
        destination = self.accounts.get(to_account)
        if source is None or destination is None:
            logger.debug("Transfer between unknown accounts %s -> %s", from_account, to_account)
            return False

        if not source.withdraw(amount):
            return False

        if not destination.is_active:
            logger.warning(
                "Transfer of %s from %s to inactive account %s: funds not credited",
                amount,
                from_account,
                to_account,
            )
        destination.deposit(amount)
        source.record(Transfer(amount, to_account))
        destination.record(Transfer(amount, from_account))
        return True

    # Short names for the public library surface
    account_type = get_account_type
    transactions = get_transactions
    activate = activate_account
    deactivate = deactivate_account

    def summary(self) -> dict[str, int]:
        """Return summary counts of accounts and transaction records."""
        active = sum(1 for account in self.accounts.values() if account.is_active)
        return {
            "accounts": len(self.accounts),
            "active": active,
            "inactive": len(self.accounts) - active,
            "transactions": sum(len(a.transactions) for a in self.accounts.values()),
        }
