"""Random ledger activity for demos and tests."""

from bank_ledger.generators.activity import ActivityGenerator, Command, CommandType, apply
from bank_ledger.generators.base import BaseGenerator

__all__ = ["ActivityGenerator", "BaseGenerator", "Command", "CommandType", "apply"]
