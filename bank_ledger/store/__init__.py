"""In-memory ledger store."""

from bank_ledger.store.ledger import Ledger

__all__ = ["Ledger"]
