"""Enumeration types for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDIT = "Credit"


class TransactionKind(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    TRANSFER = "Transfer"
