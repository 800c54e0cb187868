"""Set the like counter to a fixed value.

Usage:
    python -m app.tools.set_counter            # reset to 0
    python -m app.tools.set_counter --value 42
    python -m app.tools.set_counter --backend sql --value 0
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from app.application.ports.counter_repo import CounterRepository
from app.config import settings
from app.domain.errors import CounterStoreError
from app.infrastructure.api.dependencies import build_counter_repo

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def set_counter(counter: CounterRepository, value: int) -> int:
    """Overwrite the counter and return the value read back from the store."""
    await counter.set(value)
    stored = await counter.get()
    logger.info("Counter set to %d", stored)
    return stored


def _non_negative(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set the like counter")
    parser.add_argument("--value", type=_non_negative, default=0, help="New counter value")
    parser.add_argument(
        "--backend",
        choices=["file", "sql"],
        default=settings.counter_backend,
        help="Counter store to write (defaults to COUNTER_BACKEND)",
    )
    args = parser.parse_args(argv)

    counter = build_counter_repo(settings.model_copy(update={"counter_backend": args.backend}))
    try:
        asyncio.run(set_counter(counter, args.value))
    except CounterStoreError as e:
        logger.error("Failed to set counter: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
