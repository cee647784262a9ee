"""In-memory banking ledger with a text-menu shell."""

from bank_ledger.models import Account, AccountType, Deposit, Transaction, Transfer, Withdrawal
from bank_ledger.store import Ledger

__all__ = [
    "Account",
    "AccountType",
    "Deposit",
    "Ledger",
    "Transaction",
    "Transfer",
    "Withdrawal",
]
