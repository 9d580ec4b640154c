"""jsondiffer CLI.

Entry point for the ``jsondiffer`` command-line tool.

Usage:
    jsondiffer diff <before.json> <after.json> [--mode symbolic|plain|detailed]
                    [--show-original] [--redact [KEY ...]] [--redact-all]
                    [--placeholder TEXT] [--config FILE] [--indent N] [--verbose]

Exit codes: 0 when the documents are equivalent, 1 when they differ,
2 on errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .core.config import DiffConfig
from .core.differ import differentiate
from .core.errors import DiffError
from .core.redaction import RedactionPolicy
from .core.types import OutputMode
from .formats import load, to_json

logger = logging.getLogger(__name__)

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------


def _load_config_file(path: str) -> DiffConfig:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return DiffConfig.from_dict(data)


def _resolve_config(args: argparse.Namespace) -> DiffConfig:
    """Config file values, overridden by explicit flags."""
    base = _load_config_file(args.config) if args.config else DiffConfig.default()

    output_mode = OutputMode(args.mode) if args.mode else base.output_mode
    show_original = (
        args.show_original
        if args.show_original is not None
        else base.show_original_value
    )

    placeholder = (
        args.placeholder
        if args.placeholder is not None
        else base.redaction.placeholder
    )
    if args.redact_all:
        redaction = RedactionPolicy.redact_all(placeholder)
    elif args.redact is not None:
        redaction = RedactionPolicy.listed(args.redact, placeholder)
    else:
        redaction = RedactionPolicy(
            scope=base.redaction.scope,
            keys=base.redaction.keys,
            placeholder=placeholder,
        )

    return DiffConfig(
        output_mode=output_mode,
        show_original_value=show_original,
        redaction=redaction,
    )


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_diff(args: argparse.Namespace) -> None:
    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        before = load(args.before)
        after = load(args.after)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        result = differentiate(before, after, config)
    except DiffError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    if result is None:
        logger.info("No differences between %s and %s", args.before, args.after)
        return

    print(to_json(result, indent=args.indent))
    sys.exit(EXIT_DIFFERENT)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="jsondiffer",
        description="jsondiffer: annotated structural diffs of JSON documents",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command")

    diff_parser = subparsers.add_parser("diff", help="Compare two JSON documents")
    diff_parser.add_argument("before", help="Path to the original JSON document")
    diff_parser.add_argument("after", help="Path to the changed JSON document")
    diff_parser.add_argument(
        "--mode",
        choices=[m.value for m in OutputMode],
        default=None,
        help="How changes are annotated (default: symbolic)",
    )
    diff_parser.add_argument(
        "--show-original",
        action="store_true",
        default=None,
        help="Report the original value of changed keys instead of the new one",
    )
    diff_parser.add_argument(
        "--redact",
        nargs="*",
        metavar="KEY",
        default=None,
        help="Hide values of these keys; with no keys, hide every value",
    )
    diff_parser.add_argument(
        "--redact-all", action="store_true", help="Hide every reported value"
    )
    diff_parser.add_argument(
        "--placeholder",
        default=None,
        help="Replacement text for hidden values (default: ***)",
    )
    diff_parser.add_argument(
        "--config", default=None, help="Path to a JSON config file"
    )
    diff_parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: 2)"
    )
    diff_parser.set_defaults(func=_cmd_diff)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
