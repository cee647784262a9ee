"""Tests for custom exception hierarchy."""

from bank_ledger.exceptions import ConfigurationError, InvalidInputError, LedgerError


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        """LedgerError is a plain Exception."""
        assert isinstance(LedgerError("test"), Exception)

    def test_invalid_input_is_ledger_error(self) -> None:
        """InvalidInputError derives from LedgerError."""
        assert isinstance(InvalidInputError("test"), LedgerError)

    def test_configuration_error_is_ledger_error(self) -> None:
        """ConfigurationError derives from LedgerError."""
        assert isinstance(ConfigurationError("test"), LedgerError)

    def test_exception_message(self) -> None:
        """Message is preserved in str()."""
        err = InvalidInputError("Not an amount: 'abc'")
        assert str(err) == "Not an amount: 'abc'"
