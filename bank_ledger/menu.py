"""Text-menu shell around the ledger.

Each loop iteration prints the menu, reads one choice and its arguments,
calls a single Ledger operation and reports the result through a
ConsoleSink.
"""

import argparse
import logging
import sys
from typing import Callable, TextIO

from bank_ledger.config import AppConfig, LedgerConfig, MenuConfig
from bank_ledger.exceptions import ConfigurationError, InvalidInputError
from bank_ledger.logging import setup_logging
from bank_ledger.models import AccountType
from bank_ledger.sinks import ConsoleSink
from bank_ledger.store import Ledger

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    "Create Account",
    "Deposit",
    "Withdraw",
    "Check Balance",
    "Transfer",
    "Get Account Type",
    "Get Transactions",
    "Activate Account",
    "Deactivate Account",
    "Exit",
)
EXIT_CHOICE = len(MENU_ITEMS)

ACCOUNT_TYPE_CHOICES = {
    1: AccountType.CHECKING,
    2: AccountType.SAVINGS,
    3: AccountType.CREDIT,
}

NOT_FOUND = "Account not found!"
INSUFFICIENT = "Insufficient balance or account not found!"


def parse_choice(text: str) -> int:
    """Parse a menu selection."""
    try:
        return int(text.strip())
    except ValueError as e:
        raise InvalidInputError(f"Not a menu choice: {text!r}") from e


def parse_amount(text: str) -> float:
    """Parse an amount entered at a prompt."""
    try:
        return float(text.strip())
    except ValueError as e:
        raise InvalidInputError(f"Not an amount: {text!r}") from e


class MenuShell:
    """Interactive loop driving a Ledger."""

    def __init__(self, ledger: Ledger, sink: ConsoleSink, stdin: TextIO | None = None) -> None:
        self.ledger = ledger
        self.sink = sink
        self._stdin = stdin
        self._handlers: dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: self.deposit,
            3: self.withdraw,
            4: self.check_balance,
            5: self.transfer,
            6: self.get_account_type,
            7: self.get_transactions,
            8: self.activate_account,
            9: self.deactivate_account,
        }

    def run(self) -> None:
        """Run until Exit is chosen or input ends."""
        while True:
            for number, label in enumerate(MENU_ITEMS, start=1):
                self.sink.line(f"{number}. {label}")
            try:
                choice = parse_choice(self.prompt("Enter your choice: "))
                if choice == EXIT_CHOICE:
                    break
                handler = self._handlers.get(choice)
                if handler is None:
                    self.sink.status(False, "Invalid choice!")
                    continue
                handler()
            except InvalidInputError as e:
                logger.debug("%s", e)
                self.sink.status(False, "Invalid choice!")
            except EOFError:
                logger.debug("Input closed, leaving menu")
                break

    def prompt(self, text: str) -> str:
        """Print a prompt and read one line, raising EOFError at end of input."""
        self.sink.line(text)
        stdin = self._stdin if self._stdin is not None else sys.stdin
        line = stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _prompt_amount(self, text: str) -> float | None:
        try:
            return parse_amount(self.prompt(text))
        except InvalidInputError as e:
            logger.debug("%s", e)
            self.sink.status(False, "Invalid amount!")
            return None

    def create_account(self) -> None:
        account_id = self.prompt("Enter account number: ")
        try:
            selected = parse_choice(
                self.prompt("Enter account type (1. Checking, 2. Savings, 3. Credit): ")
            )
        except InvalidInputError:
            selected = None
        account_type = ACCOUNT_TYPE_CHOICES.get(selected) if selected is not None else None
        if account_type is None:
            self.sink.status(False, "Invalid account type!")
            return

        if self.ledger.create_account(account_id, account_type):
            self.sink.status(True, "Account created successfully!")
        else:
            self.sink.status(False, "Account already exists!")

    def deposit(self) -> None:
        account_id = self.prompt("Enter account number: ")
        amount = self._prompt_amount("Enter amount to deposit: ")
        if amount is None:
            return
        if self.ledger.deposit(account_id, amount):
            self.sink.status(True, "Deposit successful!")
        else:
            self.sink.status(False, NOT_FOUND)

    def withdraw(self) -> None:
        account_id = self.prompt("Enter account number: ")
        amount = self._prompt_amount("Enter amount to withdraw: ")
        if amount is None:
            return
        if self.ledger.withdraw(account_id, amount):
            self.sink.status(True, "Withdrawal successful!")
        else:
            self.sink.status(False, INSUFFICIENT)

    def check_balance(self) -> None:
        account_id = self.prompt("Enter account number: ")
        balance = self.ledger.balance(account_id)
        if balance is None:
            self.sink.status(False, NOT_FOUND)
        else:
            self.sink.balance(account_id, balance)

    def transfer(self) -> None:
        from_account = self.prompt("Enter account number to transfer from: ")
        to_account = self.prompt("Enter account number to transfer to: ")
        amount = self._prompt_amount("Enter amount to transfer: ")
        if amount is None:
            return
        if self.ledger.transfer(from_account, to_account, amount):
            self.sink.status(True, "Transfer successful!")
        else:
            self.sink.status(False, INSUFFICIENT)

    def get_account_type(self) -> None:
        account_id = self.prompt("Enter account number: ")
        account_type = self.ledger.get_account_type(account_id)
        if account_type is None:
            self.sink.status(False, NOT_FOUND)
        else:
            self.sink.account_type(account_id, account_type)

    def get_transactions(self) -> None:
        account_id = self.prompt("Enter account number: ")
        transactions = self.ledger.get_transactions(account_id)
        if transactions is None:
            self.sink.status(False, NOT_FOUND)
        else:
            self.sink.transactions(account_id, transactions)

    def activate_account(self) -> None:
        account_id = self.prompt("Enter account number: ")
        if self.ledger.activate_account(account_id):
            self.sink.status(True, "Account activated successfully!")
        else:
            self.sink.status(False, NOT_FOUND)

    def deactivate_account(self) -> None:
        account_id = self.prompt("Enter account number: ")
        if self.ledger.deactivate_account(account_id):
            self.sink.status(True, "Account deactivated successfully!")
        else:
            self.sink.status(False, NOT_FOUND)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive in-memory banking ledger")
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or WARNING)")
    parser.add_argument("--log-format", choices=["standard", "json"], help="Log record format")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON results")
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Refuse to create an account whose number is already in use",
    )
    return parser


def load_config(argv: list[str] | None = None) -> AppConfig:
    """Build the app config from the environment, then apply CLI overrides."""
    args = build_parser().parse_args(argv)
    env = AppConfig.from_env()

    menu = env.menu
    if args.json or args.pretty:
        menu = MenuConfig(output_format="json", pretty_json=args.pretty or menu.pretty_json)

    return AppConfig(
        ledger=LedgerConfig(
            reject_duplicates=args.reject_duplicates or env.ledger.reject_duplicates,
        ),
        menu=menu,
        log_level=args.log_level or env.log_level,
        log_format=args.log_format or env.log_format,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        config = load_config(argv)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    setup_logging(config.log_level, config.log_format)

    ledger = Ledger(config=config.ledger)
    sink = ConsoleSink(output_format=config.menu.output_format, pretty=config.menu.pretty_json)
    MenuShell(ledger, sink).run()
    logger.info("Session ended: %s", ledger.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
