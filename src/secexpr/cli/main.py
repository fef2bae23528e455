"""CLI entrypoint for secexpr."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from secexpr import __version__
from secexpr.config import SecexprConfig, load_config
from secexpr.constants.branding import CLI_DESCRIPTION
from secexpr.constants.examples import EXAMPLES, EXAMPLES_BY_ID
from secexpr.dsl import DslEngine, diagnose_dsl
from secexpr.exceptions import ConfigError
from secexpr.model import ExecutionResult
from secexpr.store import StaticDataStore, bundled_store, load_data_store
from secexpr.types.common import JsonValue


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="secexpr",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a DSL document without executing it")
    _add_common_arguments(validate)

    run = subparsers.add_parser("run", help="Validate and execute a DSL document")
    _add_common_arguments(run)
    run.add_argument(
        "-d",
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding securities.json, attributes.json and facts.json (default: bundled tables)",
    )
    run.add_argument("--json", action="store_true", help="Print the result as a JSON object")

    subparsers.add_parser("examples", help="List built-in example documents")

    return parser


def _add_common_arguments(command: argparse.ArgumentParser) -> None:
    source = command.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", default=None, help="DSL file path, or - for stdin")
    source.add_argument(
        "-e",
        "--example",
        choices=[example.id for example in EXAMPLES],
        default=None,
        help="Use a built-in example document",
    )
    command.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory searched for secexpr.yaml")
    command.add_argument("-c", "--config", type=Path, help="Explicit config file")
    command.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "examples":
        return _handle_examples()

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        raw_text = _read_source(args)
    except OSError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    if args.command == "validate":
        return _handle_validate(raw_text)
    if args.command == "run":
        return _handle_run(args, config, raw_text)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_examples() -> int:
    width = max(len(example.id) for example in EXAMPLES)
    for example in EXAMPLES:
        print(f"{example.id.ljust(width)}  {example.label}")
    return 0


def _handle_validate(raw_text: str) -> int:
    error = diagnose_dsl(raw_text)
    if error is not None:
        print(error.format(), file=sys.stderr)
        return 1

    print("DSL is valid.")
    return 0


def _handle_run(args: argparse.Namespace, config: SecexprConfig, raw_text: str) -> int:
    try:
        store = _select_store(args.data_dir or config.data_dir)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    result = DslEngine(store).run(raw_text)
    if args.json:
        print(json.dumps(_json_payload(result), allow_nan=False))
    elif result.success:
        print(format_number(result.value))
    else:
        print(f"[{result.code}] {result.message}", file=sys.stderr)
    return 0 if result.success else 1


def _json_payload(result: ExecutionResult) -> dict[str, JsonValue]:
    """Result as strict JSON; non-finite values become null."""
    payload = result.to_dict()
    if isinstance(result.value, float) and not math.isfinite(result.value):
        payload["value"] = None
    return payload


def _select_store(data_dir: Path | None) -> StaticDataStore:
    if data_dir is None:
        return bundled_store()
    return load_data_store(data_dir)


def _read_source(args: argparse.Namespace) -> str:
    if args.example is not None:
        return EXAMPLES_BY_ID[args.example].dsl
    if args.file == "-":
        return sys.stdin.read()
    return Path(args.file).read_text(encoding="utf-8")


def format_number(value: int | float) -> str:
    """Format a result the way a browser prints numbers (``2``, ``0.5``, ``Infinity``)."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


if __name__ == "__main__":
    raise SystemExit(main())
