"""Pytest configuration and fixtures."""

import logging
from typing import Iterator

import pytest

from bank_ledger.models import Account, AccountType
from bank_ledger.store import Ledger


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo setup_logging: drop the handler it installs and restore logger levels.

    Only plain StreamHandlers are touched; pytest's capture handlers manage
    themselves.
    """
    root = logging.getLogger()
    handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
    levels = {
        name: logging.getLogger(name).level for name in (None, "bank_ledger", "faker")
    }

    yield

    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ledger() -> Ledger:
    """Create a fresh ledger for each test."""
    return Ledger()


@pytest.fixture
def checking() -> Account:
    """Active, empty checking account."""
    return Account(account_type=AccountType.CHECKING)


@pytest.fixture
def funded_ledger(ledger: Ledger) -> Ledger:
    """Ledger with A1 (checking, 100.0) and A2 (savings, empty)."""
    ledger.create_account("A1", AccountType.CHECKING)
    ledger.create_account("A2", AccountType.SAVINGS)
    ledger.deposit("A1", 100.0)
    return ledger
