"""Domain models for the ledger."""

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.models.transaction import Deposit, Transaction, Transfer, Withdrawal

__all__ = [
    "Account",
    "AccountType",
    "Deposit",
    "Transaction",
    "TransactionKind",
    "Transfer",
    "Withdrawal",
]
