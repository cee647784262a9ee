"""Shared serialization utilities for sinks."""

from enum import Enum
from typing import Any

from bank_ledger.models import Deposit, Transaction, Transfer, Withdrawal


def transaction_to_dict(transaction: Transaction) -> dict:
    """Convert a transaction record to a tagged dict."""
    if isinstance(transaction, Transfer):
        return {
            "kind": transaction.kind.value,
            "amount": transaction.amount,
            "counterparty": transaction.counterparty,
        }
    if isinstance(transaction, (Deposit, Withdrawal)):
        return {"kind": transaction.kind.value, "amount": transaction.amount}
    raise TypeError(f"Not a transaction record: {transaction!r}")


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, (Deposit, Withdrawal, Transfer)):
        return transaction_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
