"""Console sink for the menu shell."""

import json
import sys
from typing import Any, Sequence, TextIO

from bank_ledger.models import AccountType, Transaction
from bank_ledger.sinks.serialization import serialize_value, transaction_to_dict


def format_amount(amount: float) -> str:
    """Render an amount, printing whole values without a fraction: ``50`` not ``50.0``."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class ConsoleSink:
    """Write ledger results to a text stream, as plain lines or JSON."""

    def __init__(
        self,
        output_format: str = "text",
        pretty: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        output_format : str
            "text" for the classic menu messages, "json" for one JSON
            document per result.
        pretty : bool
            Pretty-print JSON output.
        stream : TextIO | None
            Destination stream (default: stdout at write time).
        """
        self.output_format = output_format
        self.pretty = pretty
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def is_json(self) -> bool:
        return self.output_format == "json"

    def line(self, text: str) -> None:
        """Write a raw line regardless of output format."""
        print(text, file=self.stream)

    def status(self, ok: bool, message: str) -> None:
        """Report the outcome of an operation."""
        if self.is_json:
            self._emit({"ok": ok, "message": message})
        else:
            self.line(message)

    def balance(self, account_id: str, balance: float) -> None:
        if self.is_json:
            self._emit({"ok": True, "account": account_id, "balance": balance})
        else:
            self.line(f"Balance: {format_amount(balance)}")

    def account_type(self, account_id: str, account_type: AccountType) -> None:
        if self.is_json:
            self._emit({"ok": True, "account": account_id, "account_type": account_type.value})
        else:
            self.line(f"Account Type: {account_type.value}")

    def transactions(self, account_id: str, transactions: Sequence[Transaction]) -> None:
        """Write a numbered transaction listing."""
        if self.is_json:
            self._emit(
                {
                    "ok": True,
                    "account": account_id,
                    "transactions": [transaction_to_dict(t) for t in transactions],
                }
            )
            return
        self.line("Transactions:")
        for i, transaction in enumerate(transactions, start=1):
            self.line(f"{i}: {transaction}")

    def summary(self, counts: dict[str, int]) -> None:
        if self.is_json:
            self._emit(counts)
            return
        self.line("=" * 40)
        self.line("Ledger Summary")
        self.line("=" * 40)
        for name, count in counts.items():
            self.line(f"  {name}: {count}")

    def _emit(self, data: dict[str, Any]) -> None:
        data = serialize_value(data)
        if self.pretty:
            self.line(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            self.line(json.dumps(data, ensure_ascii=False))
