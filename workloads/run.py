"""
CLI entry point for running a workload file through the scheduler.

Usage:
    python -m workloads.run                                         # default workload, balanced
    python -m workloads.run workloads/data/workload_01.txt --strategy fee_first
    python -m workloads.run --weights 0.5 0.5 0 0                   # custom weights
    python -m workloads.run --strategy all --delay-ms 0             # compare every strategy
"""

import argparse
import logging
import sys

from config.settings import settings
from models.enums import WeightingStrategy
from scheduler.errors import InvalidWeightVectorError
from scheduler.registry import get_strategy_weights
from workloads.loader import load_workload
from workloads.runner import process_workload

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted Transaction Scheduler workload runner")
    parser.add_argument(
        "workload", nargs="?", default=settings.WORKLOAD_PATH,
        help=f"Workload file to process (default: {settings.WORKLOAD_PATH})",
    )
    parser.add_argument(
        "--strategy", type=str, default=settings.WORKLOAD_STRATEGY,
        choices=[s.value for s in WeightingStrategy] + ["all"],
        help=f"Named weighting strategy (default: {settings.WORKLOAD_STRATEGY})",
    )
    parser.add_argument(
        "--weights", type=float, nargs="+", metavar="W",
        help="Custom weights: fee time complexity tier (overrides --strategy)",
    )
    parser.add_argument(
        "--delay-ms", type=float, default=settings.PROCESSING_DELAY_MS,
        help="Simulated processing time per complexity point, in ms",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        transactions = load_workload(args.workload)
    except FileNotFoundError as e:
        print(f"{e}... check the path?", file=sys.stderr)
        return 1

    if not transactions:
        print(f"No transactions found in {args.workload}")
        return 0

    if args.weights is not None:
        runs = [("Custom", args.weights)]
    elif args.strategy == "all":
        runs = [(s.value, get_strategy_weights(s)) for s in WeightingStrategy]
    else:
        runs = [(args.strategy, get_strategy_weights(args.strategy))]

    for name, weights in runs:
        try:
            report = process_workload(
                transactions, weights, name, delay_ms_per_complexity=args.delay_ms
            )
        except InvalidWeightVectorError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print("\n".join(report.format_lines()))
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
