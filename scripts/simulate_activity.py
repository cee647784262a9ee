#!/usr/bin/env python3
"""Drive an in-memory ledger with generated activity.

Generates a seeded stream of create/deposit/withdraw/transfer/activate/
deactivate commands, applies them to a fresh Ledger and prints a summary.
"""

import argparse
import logging
import sys
import time
from collections import Counter
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import LedgerConfig
from bank_ledger.generators import ActivityGenerator, apply
from bank_ledger.logging import setup_logging
from bank_ledger.sinks import ConsoleSink
from bank_ledger.store import Ledger

logger = logging.getLogger(__name__)


def simulate(ledger: Ledger, generator: ActivityGenerator, count: int) -> Counter:
    """Apply ``count`` generated commands, counting outcomes per command type."""
    outcomes: Counter = Counter()
    for command in generator.generate_batch(count):
        ok = apply(ledger, command)
        outcomes[f"{command.command_type.value.lower()}_{'ok' if ok else 'failed'}"] += 1
    return outcomes


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Simulate activity on an in-memory ledger")
    parser.add_argument(
        "--commands",
        type=int,
        default=1000,
        help="Number of commands to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--unknown-rate",
        type=float,
        default=0.02,
        help="Share of commands aimed at accounts that do not exist (default: 0.02)",
    )
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Refuse duplicate account creation instead of replacing",
    )
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    args = parser.parse_args()

    setup_logging(args.log_level)

    ledger = Ledger(config=LedgerConfig(reject_duplicates=args.reject_duplicates))
    generator = ActivityGenerator(seed=args.seed, unknown_rate=args.unknown_rate)

    logger.info("Simulating %d commands (seed=%d)...", args.commands, args.seed)
    t0 = time.perf_counter()
    outcomes = simulate(ledger, generator, args.commands)
    logger.info("Simulation complete in %.2fs", time.perf_counter() - t0)

    sink = ConsoleSink(output_format="json" if args.json else "text", pretty=args.json)
    sink.summary({**ledger.summary(), **dict(sorted(outcomes.items()))})


if __name__ == "__main__":
    main()
