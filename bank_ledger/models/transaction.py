"""Transaction records kept in an account's history.

A transaction is one of three frozen record types. The set is closed:
code that inspects a record matches on ``kind`` (or the class) and
handles all three.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Deposit:
    """Money credited to the owning account."""

    amount: float

    kind: ClassVar[TransactionKind] = TransactionKind.DEPOSIT

    def __str__(self) -> str:
        return f"Deposit({self.amount!r})"


@dataclass(frozen=True)
class Withdrawal:
    """Money debited from the owning account."""

    amount: float

    kind: ClassVar[TransactionKind] = TransactionKind.WITHDRAWAL

    def __str__(self) -> str:
        return f"Withdrawal({self.amount!r})"


@dataclass(frozen=True)
class Transfer:
    """One leg of a transfer, recorded on both the source and destination.

    ``counterparty`` is the identifier of the other account involved.
    """

    amount: float
    counterparty: str

    kind: ClassVar[TransactionKind] = TransactionKind.TRANSFER

    def __str__(self) -> str:
        return f'Transfer({self.amount!r}, "{self.counterparty}")'


Transaction = Union[Deposit, Withdrawal, Transfer]
