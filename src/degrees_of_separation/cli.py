"""Command-line interface for degrees of separation."""

import argparse
import logging
import sys

from degrees_of_separation.runner.analyze import main_analyze
from degrees_of_separation.runner.execution import EXECUTOR_CHOICES


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="degrees-of-separation",
        description="Report connectivity and degrees of separation for an undirected graph.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the edge list (one comma-separated source,target pair per line)",
    )

    parser.add_argument(
        "--executor",
        choices=EXECUTOR_CHOICES,
        default=None,
        help="How per-node BFS runs are executed (default: DOS_EXECUTOR or GIL-based policy)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads or processes (default: executor default)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")

    main_analyze(
        input_path=args.input_file,
        executor_name=args.executor,
        workers=args.workers,
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
