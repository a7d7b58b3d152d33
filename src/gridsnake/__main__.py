from __future__ import annotations

import argparse
import logging
import random

from . import config
from .game import run
from .state import score

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="gridsnake", add_help=True)
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    parser.add_argument(
        "--clock",
        type=int,
        default=config.CLOCK_HZ,
        help="Driver loop rate in frames per second; full steps come every (clock - speed) frames.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        state = run(rng=rng, clock_hz=args.clock)
    except KeyboardInterrupt:
        logger.info("interrupted")
        return

    print("Game Over! Score:", score(state))


if __name__ == "__main__":
    main()
