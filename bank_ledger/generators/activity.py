"""Generator of random ledger commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import AccountType
from bank_ledger.store import Ledger


class CommandType(str, Enum):
    CREATE = "CREATE"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"
    ACTIVATE = "ACTIVATE"
    DEACTIVATE = "DEACTIVATE"


@dataclass(frozen=True)
class Command:
    """One ledger operation with its arguments."""

    command_type: CommandType
    account_id: str
    amount: float | None = None
    to_account: str | None = None
    account_type: AccountType | None = None


class ActivityGenerator(BaseGenerator):
    """Generate a plausible stream of ledger commands.

    Identifiers come from Faker BBANs. The generator remembers the
    accounts it has created so most commands target existing accounts;
    ``unknown_rate`` controls how often a never-created identifier is
    used instead.
    """

    COMMAND_TYPES = list(CommandType)
    COMMAND_WEIGHTS = [0.15, 0.30, 0.25, 0.20, 0.05, 0.05]

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.60, 0.30, 0.10]

    def __init__(
        self,
        seed: int | None = None,
        unknown_rate: float = 0.02,
        max_amount: float = 500.0,
    ) -> None:
        super().__init__(seed)
        self.unknown_rate = unknown_rate
        self.max_amount = max_amount
        self.known_accounts: list[str] = []

    def generate(self) -> Command:
        """Generate a single command."""
        if not self.known_accounts:
            return self._create()

        command_type = self.random.choices(
            self.COMMAND_TYPES, weights=self.COMMAND_WEIGHTS, k=1
        )[0]
        if command_type == CommandType.CREATE:
            return self._create()

        account_id = self._pick_account()
        if command_type in (CommandType.ACTIVATE, CommandType.DEACTIVATE):
            return Command(command_type, account_id)
        if command_type == CommandType.TRANSFER:
            return Command(
                command_type,
                account_id,
                amount=self._amount(),
                to_account=self._pick_account(),
            )
        return Command(command_type, account_id, amount=self._amount())

    def generate_batch(self, count: int) -> Iterator[Command]:
        """Generate ``count`` commands."""
        for _ in range(count):
            yield self.generate()

    def _create(self) -> Command:
        account_id = self.fake.unique.bban()
        self.known_accounts.append(account_id)
        account_type = self.random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]
        return Command(CommandType.CREATE, account_id, account_type=account_type)

    def _pick_account(self) -> str:
        if self.random.random() < self.unknown_rate:
            return f"UNKNOWN-{self.fake.unique.bban()}"
        return self.random.choice(self.known_accounts)

    def _amount(self) -> float:
        return round(self.random.uniform(1.0, self.max_amount), 2)


def apply(ledger: Ledger, command: Command) -> bool:
    """Execute a command against a ledger and return its result."""
    if command.command_type == CommandType.CREATE:
        return ledger.create_account(command.account_id, command.account_type or AccountType.CHECKING)
    if command.command_type == CommandType.DEPOSIT:
        return ledger.deposit(command.account_id, command.amount or 0.0)
    if command.command_type == CommandType.WITHDRAW:
        return ledger.withdraw(command.account_id, command.amount or 0.0)
    if command.command_type == CommandType.TRANSFER:
        return ledger.transfer(command.account_id, command.to_account or "", command.amount or 0.0)
    if command.command_type == CommandType.ACTIVATE:
        return ledger.activate_account(command.account_id)
    if command.command_type == CommandType.DEACTIVATE:
        return ledger.deactivate_account(command.account_id)
    raise ValueError(f"Unknown command type: {command.command_type}")
