"""Tests for the console sink."""

import io
import json

from bank_ledger.models import AccountType, Deposit, Transfer, Withdrawal
from bank_ledger.sinks import ConsoleSink
from bank_ledger.sinks.console import format_amount


def _text_sink() -> tuple[ConsoleSink, io.StringIO]:
    stream = io.StringIO()
    return ConsoleSink(stream=stream), stream


def _json_sink(pretty: bool = False) -> tuple[ConsoleSink, io.StringIO]:
    stream = io.StringIO()
    return ConsoleSink(output_format="json", pretty=pretty, stream=stream), stream


class TestConsoleSinkText:
    """Tests for text output."""

    def test_status(self) -> None:
        """Test a status line."""
        sink, stream = _text_sink()
        sink.status(True, "Deposit successful!")
        assert stream.getvalue() == "Deposit successful!\n"

    def test_balance(self) -> None:
        """Test the balance line."""
        sink, stream = _text_sink()
        sink.balance("A1", 70.0)
        assert stream.getvalue() == "Balance: 70\n"

    def test_fractional_balance(self) -> None:
        """Test a fractional balance keeps its decimals."""
        sink, stream = _text_sink()
        sink.balance("A1", 12.75)
        assert stream.getvalue() == "Balance: 12.75\n"

    def test_account_type(self) -> None:
        """Test the account type line."""
        sink, stream = _text_sink()
        sink.account_type("A1", AccountType.SAVINGS)
        assert stream.getvalue() == "Account Type: Savings\n"

    def test_transactions(self) -> None:
        """Test the transaction listing."""
        sink, stream = _text_sink()
        sink.transactions("A1", (Deposit(100.0), Withdrawal(30.0), Transfer(30.0, "A2")))

        assert stream.getvalue().splitlines() == [
            "Transactions:",
            "1: Deposit(100.0)",
            "2: Withdrawal(30.0)",
            '3: Transfer(30.0, "A2")',
        ]

    def test_empty_transactions(self) -> None:
        """Test an empty listing prints only the header."""
        sink, stream = _text_sink()
        sink.transactions("A1", ())
        assert stream.getvalue() == "Transactions:\n"

    def test_summary(self) -> None:
        """Test the summary block."""
        sink, stream = _text_sink()
        sink.summary({"accounts": 2, "transactions": 5})

        output = stream.getvalue()
        assert "Ledger Summary" in output
        assert "  accounts: 2" in output
        assert "  transactions: 5" in output

    def test_defaults_to_stdout(self, capsys) -> None:
        """Test output goes to stdout when no stream is given."""
        ConsoleSink().line("hello")
        assert capsys.readouterr().out == "hello\n"


class TestConsoleSinkJson:
    """Tests for JSON output."""

    def test_status(self) -> None:
        """Test a status line."""
        sink, stream = _json_sink()
        sink.status(False, "Account not found!")
        assert json.loads(stream.getvalue()) == {"ok": False, "message": "Account not found!"}

    def test_balance(self) -> None:
        """Test the balance line."""
        sink, stream = _json_sink()
        sink.balance("A1", 12.5)
        assert json.loads(stream.getvalue()) == {"ok": True, "account": "A1", "balance": 12.5}

    def test_account_type(self) -> None:
        """Test the account type line."""
        sink, stream = _json_sink()
        sink.account_type("A1", AccountType.CREDIT)
        assert json.loads(stream.getvalue())["account_type"] == "Credit"

    def test_transactions(self) -> None:
        """Test the transaction listing."""
        sink, stream = _json_sink()
        sink.transactions("A2", (Transfer(30.0, "A1"),))

        data = json.loads(stream.getvalue())
        assert data["account"] == "A2"
        assert data["transactions"] == [{"kind": "Transfer", "amount": 30.0, "counterparty": "A1"}]

    def test_pretty(self) -> None:
        """Test indented JSON."""
        sink, stream = _json_sink(pretty=True)
        sink.summary({"accounts": 1})

        assert stream.getvalue() == '{\n  "accounts": 1\n}\n'

    def test_line_is_not_wrapped(self) -> None:
        """Test raw lines are written as-is in JSON mode."""
        sink, stream = _json_sink()
        sink.line("1. Create Account")
        assert stream.getvalue() == "1. Create Account\n"


class TestFormatAmount:
    """Tests for format_amount."""

    def test_whole_number(self) -> None:
        """Test whole amounts print without a fraction."""
        assert format_amount(50.0) == "50"
        assert format_amount(0.0) == "0"
        assert format_amount(-3.0) == "-3"

    def test_fraction(self) -> None:
        """Test fractional amounts print as Python floats."""
        assert format_amount(0.5) == "0.5"
        assert format_amount(70.25) == "70.25"

    def test_non_finite(self) -> None:
        """Test infinities pass through unchanged."""
        assert format_amount(float("inf")) == "inf"
