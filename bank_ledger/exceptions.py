"""Custom exception hierarchy for bank-ledger.

Ledger operations report not-found, inactive and insufficient-funds
conditions as return values. These exceptions cover the faults around
the core: unparsable shell input and bad configuration.
"""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class InvalidInputError(LedgerError):
    """Raised when text entered at the menu cannot be parsed."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
