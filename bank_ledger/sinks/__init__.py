"""Output sinks for rendering ledger results."""

from bank_ledger.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
