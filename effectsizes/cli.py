"""Command-line interface"""

import argparse
import logging
from pathlib import Path

from effectsizes.analysis import compute_effect_sizes
from effectsizes.config import AnalysisConfig, load_config
from effectsizes.effects import format_effect_size
from effectsizes.registry import list_measures
from effectsizes.schemas import EffectSizeRecord
from effectsizes.utils.io import read_samples, write_jsonl
from effectsizes.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Effect sizes with confidence intervals")
    parser.add_argument(
        "--log-level", type=str.upper, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Compute command
    compute_parser = subparsers.add_parser("compute", help="Compute effect sizes between two samples")
    compute_parser.add_argument("--xs", type=str, required=True, help="First (treatment) sample file")
    compute_parser.add_argument("--ys", type=str, required=True, help="Second (control) sample file")
    compute_parser.add_argument("--column", type=str, default=None, help="CSV column to read from both files")
    compute_parser.add_argument("--config", type=str, default=None, help="Path to config YAML file")
    compute_parser.add_argument(
        "--measure", action="append", choices=list_measures(), default=None,
        help="Measure to compute, may be repeated (default: all)",
    )
    compute_parser.add_argument("--coverage", type=float, default=None, help="Two-sided coverage level")
    compute_parser.add_argument("--bootstrap", type=int, default=None, help="Number of bootstrap resamples")
    compute_parser.add_argument("--seed", type=int, default=None, help="Random seed for bootstrap resampling")
    compute_parser.add_argument("--progress", action="store_true", help="Show bootstrap progress")
    compute_parser.add_argument("--precision", type=int, default=None, help="Digits to print")
    compute_parser.add_argument("--out", type=str, default=None, help="Write result records to this JSONL file")

    # Measures command
    subparsers.add_parser("measures", help="List available measures")

    return parser


def resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    """Load the config file, if any, and apply command line overrides."""
    config = load_config(args.config) if args.config else AnalysisConfig()

    interval_overrides = {
        key: value
        for key, value in {
            "coverage": args.coverage,
            "bootstrap": args.bootstrap,
            "seed": args.seed,
        }.items()
        if value is not None
    }
    if args.progress:
        interval_overrides["progress"] = True
    output_overrides = {
        key: value
        for key, value in {"precision": args.precision, "out": args.out}.items()
        if value is not None
    }

    # Re-validate so that overrides go through the same field constraints
    data = config.model_dump()
    data["interval"].update(interval_overrides)
    data["output"].update(output_overrides)
    if args.measure:
        data["measures"] = args.measure
    return AnalysisConfig(**data)


def run_compute(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    xs = read_samples(args.xs, args.column)
    ys = read_samples(args.ys, args.column)
    logger.info("Loaded samples: n_x=%d n_y=%d", len(xs), len(ys))

    results = compute_effect_sizes(
        xs, ys, config.measures,
        coverage=config.interval.coverage,
        bootstrap=config.interval.bootstrap,
        seed=config.interval.seed,
        progress=config.interval.progress,
    )

    for result in results:
        print(f"{result.measure}: {format_effect_size(result, config.output.precision)} [{result.magnitude}]")

    if config.output.out:
        records = [EffectSizeRecord.from_result(r, len(xs), len(ys)).to_dict() for r in results]
        write_jsonl(config.output.out, records)
        logger.info("Wrote %d records to %s", len(records), config.output.out)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(Path(args.log_file) if args.log_file else None, args.log_level)

    if args.command == "measures":
        for name in list_measures():
            print(name)
        return 0

    try:
        return run_compute(args)
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
