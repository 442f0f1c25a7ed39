"""CLI entrypoints for signalcomplete commands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

from .config import ConfigError, SignalCompleteConfig, load_config
from .engine import CompletionEngine
from .extractors import available_strategies
from .logging import configure_logging
from .models import SignalRecord, Suggestion


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON instead of a table.",
    )


def _add_root_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        action="append",
        default=None,
        help="Project root to search for components (repeatable; defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signalcomplete",
        description="Suggest signal props for UI components from their source.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to .signalcomplete.yml (defaults to the first --root).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug diagnostics to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    signals_parser = subparsers.add_parser(
        "signals",
        help="List the signals a component declares.",
    )
    _add_common_options(signals_parser)
    _add_root_option(signals_parser)
    signals_parser.add_argument("component", help="Component name, e.g. Button.")

    scan_parser = subparsers.add_parser(
        "scan",
        help="Extract signals from a single source file.",
    )
    _add_common_options(scan_parser)
    scan_parser.add_argument("file", help="Component source file to scan.")
    scan_parser.add_argument(
        "--strategy",
        choices=available_strategies(),
        default=None,
        help="Extraction strategy to use (overrides configuration).",
    )

    complete_parser = subparsers.add_parser(
        "complete",
        help="Show suggestions for a caret position inside a markup file.",
    )
    _add_common_options(complete_parser)
    _add_root_option(complete_parser)
    complete_parser.add_argument("file", help="File being edited.")
    position = complete_parser.add_mutually_exclusive_group(required=True)
    position.add_argument("--offset", type=int, help="Caret offset in characters.")
    position.add_argument("--line", type=int, help="1-based caret line (use with --column).")
    complete_parser.add_argument(
        "--column",
        type=int,
        default=None,
        help="1-based caret column; defaults to the end of --line.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for signalcomplete commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    roots = [Path(root) for root in (getattr(args, "root", None) or ["."])]
    try:
        config = _load_config(args.config, roots)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "scan" and args.strategy:
        config.extractor.strategy = args.strategy

    engine = CompletionEngine(config)

    if args.command == "signals":
        records = engine.signals_for_component(args.component, roots)
        if not records:
            parser.exit(1, f"No signals found for component '{args.component}'\n")
        _print_records(records, as_json=args.json)
    elif args.command == "scan":
        path = Path(args.file)
        if not path.is_file():
            parser.exit(1, f"File not found: {path}\n")
        _print_records(engine.signals_for_file(path), as_json=args.json)
    elif args.command == "complete":
        try:
            buffer = Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"Unable to read {args.file}: {exc}\n")
        if args.offset is not None:
            offset = args.offset
        else:
            offset = _offset_for(buffer, args.line, args.column)
        suggestions = engine.complete(buffer, offset, roots)
        _print_suggestions(suggestions, as_json=args.json)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load_config(config_path: str | None, roots: Sequence[Path]) -> SignalCompleteConfig:
    if config_path:
        return load_config(Path(config_path))
    return load_config(roots[0])


def _offset_for(buffer: str, line: int, column: int | None) -> int:
    """Translate a 1-based line/column pair to a character offset."""
    lines = buffer.split("\n")
    index = max(0, min(line - 1, len(lines) - 1))
    offset = sum(len(text) + 1 for text in lines[:index])
    line_length = len(lines[index])
    col = line_length if column is None else max(0, min(column - 1, line_length))
    return offset + col


def _print_records(records: List[SignalRecord], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(record) for record in records], indent=2))
        return
    for record in records:
        suffix = f" [{record.layer}]" if record.layer else ""
        print(f"{record.name:<24} {record.category:<10} {record.description}{suffix}")


def _print_suggestions(suggestions: List[Suggestion], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(item) for item in suggestions], indent=2))
        return
    if not suggestions:
        print("No suggestions at this position")
        return
    for item in suggestions:
        marker = "*" if item.priority else " "
        print(f"{marker} {item.name:<24} {item.category:<10} {item.description}")


if __name__ == "__main__":
    main(sys.argv[1:])
