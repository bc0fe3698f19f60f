"""bignat-bench — командная строка бенчмарка стратегий умножения."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from bignat.bench.config import (
    DEFAULT_MAX_EXPONENT,
    DEFAULT_MIN_EXPONENT,
    DEFAULT_OPERATIONS_PER_SIZE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    BenchmarkConfig,
)
from bignat.bench.runner import run_all
from bignat.core.math.multiplication import MultiplicationStrategy

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignat-bench",
        description="Time batches of DecimalBigNat multiplications for growing operand sizes (powers of two).",
    )
    parser.add_argument("--min-exponent", type=int, default=DEFAULT_MIN_EXPONENT, help="smallest size is 2^N digits")
    parser.add_argument("--max-exponent", type=int, default=DEFAULT_MAX_EXPONENT, help="largest size is 2^N digits")
    parser.add_argument(
        "--operations",
        type=int,
        default=DEFAULT_OPERATIONS_PER_SIZE,
        help="multiplications per batch (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="seconds allowed per batch before the strategy stops growing (default: %(default)s)",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        choices=[strategy.value for strategy in MultiplicationStrategy],
        help="strategy to run; repeat for several (default: all)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for operand generation")
    parser.add_argument("--output", default=DEFAULT_OUTPUT_PATH, help="CSV output path (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    settings = {
        "min_exponent": args.min_exponent,
        "max_exponent": args.max_exponent,
        "operations_per_size": args.operations,
        "timeout_seconds": args.timeout,
        "seed": args.seed,
        "output_path": args.output,
    }
    if args.strategy:
        settings["strategies"] = tuple(args.strategy)

    try:
        config = BenchmarkConfig(**settings)
    except ValidationError as e:
        print(f"Invalid benchmark configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    table = run_all(config)
    path = table.write_csv(config.output_path)
    logger.info("Wrote %d rows to %s", len(table.rows), path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
