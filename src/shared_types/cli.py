"""Command-line interface for shared-types.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import pydantic
import structlog

from shared_types import __version__
from shared_types.config import get_settings
from shared_types.exceptions import ConfigurationError, SchemaValidationError, SharedTypesError
from shared_types.filesystem import entry_from_path
from shared_types.gmail.mapping import message_to_email_detail, message_to_email_summary
from shared_types.utils import configure_logging
from shared_types.validation import SCHEMAS, get_schema, json_schema, validate_json

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shared-types", description="Shared wire schemas")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON document against a schema",
    )
    validate_parser.add_argument("schema", choices=sorted(SCHEMAS), help="Schema name")
    validate_parser.add_argument("file", help="Path to the JSON document, or - for stdin")

    schema_parser = subparsers.add_parser("schema", help="Print the JSON Schema of a schema")
    schema_parser.add_argument("schema", choices=sorted(SCHEMAS), help="Schema name")

    gmail_parser = subparsers.add_parser(
        "gmail",
        help="Map a raw Gmail API message resource onto the mail schema",
    )
    gmail_parser.add_argument("kind", choices=["summary", "detail"], help="Target shape")
    gmail_parser.add_argument("file", help="Path to the message JSON, or - for stdin")

    stat_parser = subparsers.add_parser("stat", help="Describe one path as a file entry")
    stat_parser.add_argument("path", type=Path, help="Path to describe")

    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def _cmd_validate(args: argparse.Namespace) -> int:
    model = get_schema(args.schema)
    try:
        validate_json(model, _read_input(args.file))
    except SchemaValidationError as exc:
        for err in exc.errors:
            loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
            print(f"{loc}: {err.get('msg')}", file=sys.stderr)
        return 1

    print(f"OK: valid {args.schema}")
    return 0


def _cmd_schema(args: argparse.Namespace) -> int:
    _print_json(json_schema(args.schema))
    return 0


def _cmd_gmail(args: argparse.Namespace) -> int:
    settings = get_settings()
    message = json.loads(_read_input(args.file))
    if not isinstance(message, dict):
        print("Expected a JSON object for the message resource", file=sys.stderr)
        return 1

    if args.kind == "summary":
        _print_json(message_to_email_summary(message, settings).to_wire())
        return 0

    detail = message_to_email_detail(message, settings)
    if detail is None:
        print("Message has no payload; fetch it with format=full", file=sys.stderr)
        return 1
    _print_json(detail.to_wire())
    return 0


def _cmd_stat(args: argparse.Namespace) -> int:
    if not args.path.exists() and not args.path.is_symlink():
        print(f"Path not found: {args.path}", file=sys.stderr)
        return 1
    _print_json(entry_from_path(args.path).to_wire())
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the shared-types CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    try:
        settings = get_settings()
        configure_logging(settings)
    except (pydantic.ValidationError, ConfigurationError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    logger.debug("shared_types_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    handlers = {
        "validate": _cmd_validate,
        "schema": _cmd_schema,
        "gmail": _cmd_gmail,
        "stat": _cmd_stat,
    }
    handler = handlers.get(parsed.command)
    if handler is None:
        logger.error("unknown_command", command=parsed.command)
        return 2

    try:
        return handler(parsed)
    except (OSError, json.JSONDecodeError, SharedTypesError) as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
