"""Command line interface for jsondelta."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .engine import JsonDeltaEngine
from .exceptions import InvalidJsonInput, SettingsError
from .formatters import format_inline, format_stats
from .models import EngineConfig, LogLevel
from .runner import ComparisonRunner
from .settings import DiffSettings, load_settings
from .utils import parse_json_pair

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_INVALID = 2

LOG_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsondelta",
        description="Line diff of two JSON documents with move detection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jsondelta before.json after.json
  jsondelta before.json after.json --exclude meta.requestId --exclude 'items[*].etag'
  jsondelta before.json after.json --keep-order --only-changes
  jsondelta --datasets datasets/ --settings settings.yaml --report report.json
        """
    )

    parser.add_argument("left", nargs="?", help="Path to the original JSON document")
    parser.add_argument("right", nargs="?", help="Path to the modified JSON document")
    parser.add_argument(
        "-e", "--exclude",
        action="append",
        default=[],
        metavar="PATH",
        help="Exclusion path (repeatable), e.g. items[*].id or $..updatedAt"
    )
    parser.add_argument("-s", "--settings", help="YAML/JSON settings file")
    parser.add_argument(
        "--keep-order",
        action="store_true",
        help="Compare key and array order as-is instead of normalizing it"
    )
    parser.add_argument("--only-changes", action="store_true", help="Hide unchanged lines")
    parser.add_argument("-n", "--line-numbers", action="store_true", help="Show old/new line numbers")
    parser.add_argument("--json", action="store_true", help="Print the diff result as JSON")
    parser.add_argument("-d", "--datasets", help="Folder of dataset files to compare in batch")
    parser.add_argument("-r", "--report", help="Path to write the batch report JSON")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARN.value,
        help="Logging level"
    )
    return parser


def _read_text(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _run_batch(args, settings: DiffSettings, config: EngineConfig) -> int:
    if not Path(args.datasets).exists():
        print(f"Error: Datasets folder not found: {args.datasets}", file=sys.stderr)
        return EXIT_INVALID

    runner = ComparisonRunner(settings, config)
    report = runner.run(args.datasets, print_report=not args.json)

    if args.report:
        with open(args.report, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), indent=2, fp=f)
        if not args.json:
            print(f"\nReport saved to: {args.report}")
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))

    return EXIT_SAME if report.failed == 0 else EXIT_DIFFERENT


def _run_pair(args, settings: DiffSettings, config: EngineConfig) -> int:
    for path in (args.left, args.right):
        if not Path(path).exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return EXIT_INVALID

    try:
        left, right = parse_json_pair(_read_text(args.left), _read_text(args.right))
    except InvalidJsonInput as e:
        if e.left_error:
            print(f"Error: {args.left}: {e.left_error}", file=sys.stderr)
        if e.right_error:
            print(f"Error: {args.right}: {e.right_error}", file=sys.stderr)
        return EXIT_INVALID

    engine = JsonDeltaEngine(config)
    result = engine.compare(left, right, settings.to_options())

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        rendered = format_inline(result, only_changes=args.only_changes, line_numbers=args.line_numbers)
        if rendered:
            print(rendered)
        print(format_stats(result))

    return EXIT_DIFFERENT if result.has_differences else EXIT_SAME


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = EngineConfig(log_level=LogLevel(args.log_level))
    logging.basicConfig(
        level=LOG_LEVELS[config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.datasets and not (args.left and args.right):
        parser.error("LEFT and RIGHT files are required unless --datasets is given")

    try:
        settings = load_settings(args.settings) if args.settings else DiffSettings()
    except (FileNotFoundError, SettingsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    for path in args.exclude:
        settings.add_path(path)
    if args.keep_order:
        settings.ignore_key_order = False

    if args.datasets:
        return _run_batch(args, settings, config)
    return _run_pair(args, settings, config)


if __name__ == "__main__":
    sys.exit(main())
