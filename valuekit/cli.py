"""
Command-line interface for valuekit.

Samples generated values and checks raw text against the domain types,
mostly useful for eyeballing generators and replaying a failing seed.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import __version__
from .commands import check_command, sample_command
from .commands.registry import known_expressions
from .config import GenerationConfig
from .core.errors import ValuekitError
from .utilities.console import print_error
from .utilities.constants import DEFAULT_SAMPLE_COUNT

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="valuekit",
        description="Validated domain values and their arbitrary and negated generators",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    types_help = f"Type expression, one of: {', '.join(known_expressions())}"

    parser_sample = subparsers.add_parser("sample", help="Print generated values for a type")
    parser_sample.add_argument("type", help=types_help)
    parser_sample.add_argument("--seed", help="Run seed as 64 hex characters (default: VALUEKIT_SEED or random)")
    parser_sample.add_argument(
        "--count",
        type=int,
        default=DEFAULT_SAMPLE_COUNT,
        help=f"Number of cases to generate (default: {DEFAULT_SAMPLE_COUNT})",
    )
    parser_sample.add_argument("--negated", action="store_true", help="Generate values the type must reject")

    parser_check = subparsers.add_parser("check", help="Parse raw text as a type")
    parser_check.add_argument("type", help=types_help)
    parser_check.add_argument("raw", help="Raw text to parse")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "sample":
            sample_command(
                args.type,
                seed=args.seed,
                count=args.count,
                negated=args.negated,
                config=GenerationConfig.from_env(),
            )
            return 0
        if args.command == "check":
            return 0 if check_command(args.type, args.raw) else 1
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130
    except (ValuekitError, ValueError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print_error(str(e))
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
