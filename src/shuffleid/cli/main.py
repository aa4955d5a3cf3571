# SPDX-License-Identifier: MIT
"""Command-line interface for encoding and decoding IDs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Sequence

import logfire

from shuffleid.core.encoder import IdEncoder
from shuffleid.core.widths import IntegerWidth
from shuffleid.errors import (
    InvalidConfigurationError,
    OutOfRangeError,
    RegenerationExhaustedError,
)
from shuffleid.observability.monitoring import init_logfire, package_version
from shuffleid.runtime.environment import RuntimeEnv
from shuffleid.runtime.settings import Settings, load_settings

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]

EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

logger = logging.getLogger(__name__)


def _print_version() -> None:
    """Print the installed package version."""
    line = f"shuffleid {package_version()}"
    print(line)
    logger.info(line)


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire from the settings level and verbosity flags."""
    index = LOG_LEVELS.index(settings.log_level) + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])  # type: ignore[arg-type]


def _cmd_encode(args: argparse.Namespace, encoder: IdEncoder) -> None:
    """Print the ID for the numbers given on the command line."""
    print(encoder.encode(args.numbers))


def _cmd_decode(args: argparse.Namespace, encoder: IdEncoder) -> None:
    """Print one JSON array of numbers per ID."""
    width = IntegerWidth.parse(args.width) if args.width else None
    for id_ in args.ids:
        if width is not None:
            numbers = encoder.decode_as(id_, width)
        else:
            numbers = encoder.decode(id_)
        print(json.dumps(numbers))


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Attach options shared by every subcommand to ``parser``."""
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: config/shuffleid.yaml).",
    )
    parser.add_argument(
        "--alphabet",
        help="Override the alphabet used to build IDs.",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        help="Override the minimum ID length (0-255).",
    )
    parser.add_argument(
        "--blocklist-file",
        help="JSON array or newline-separated file of blocked words.",
    )
    parser.add_argument(
        "--no-blocklist",
        action="store_true",
        help="Generate IDs without any blocklist.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable).",
    )
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        description=(
            "Encode lists of non-negative integers into short, reversible IDs "
            "and decode them back."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the shuffleid version and exit.",
    )
    common = _add_common_args(
        argparse.ArgumentParser(
            add_help=False, formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    )
    subparsers = parser.add_subparsers(dest="command")

    encode = subparsers.add_parser(
        "encode",
        parents=[common],
        help="Encode numbers into a single ID.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    encode.add_argument(
        "numbers", nargs="+", type=int, help="Non-negative integers to encode."
    )
    encode.set_defaults(func=_cmd_encode)

    decode = subparsers.add_parser(
        "decode",
        parents=[common],
        help="Decode IDs back into numbers.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    decode.add_argument("ids", nargs="+", help="IDs to decode.")
    decode.add_argument(
        "--width",
        choices=[member.name.lower() for member in IntegerWidth],
        help="Reject decoded values that do not fit this integer width.",
    )
    decode.set_defaults(func=_cmd_decode)
    return parser


def _apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> None:
    """Override settings fields based on CLI arguments."""
    arg_mapping: dict[str, tuple[str, Callable[[Any], Any] | None]] = {
        "alphabet": ("alphabet", None),
        "min_length": ("min_length", None),
        "blocklist_file": ("blocklist_file", Path),
    }
    for arg_name, (attr, converter) in arg_mapping.items():
        value = getattr(args, arg_name, None)
        if value is not None:  # branch: override settings when flag provided
            setattr(settings, attr, converter(value) if converter else value)
    if args.no_blocklist:
        settings.use_blocklist = False


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(EXIT_FAILURE)
    try:
        settings = load_settings(args.config)
        _apply_args_to_settings(args, settings)
        _configure_logging(args, settings)
        env = RuntimeEnv.initialize(settings)
    except (FileNotFoundError, RuntimeError, InvalidConfigurationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_CONFIG_ERROR) from exc
    try:
        args.func(args, env.encoder)
    except (OutOfRangeError, RegenerationExhaustedError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_FAILURE) from exc
    finally:
        logfire.force_flush()


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()
