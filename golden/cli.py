"""
Golden CLI

Offline comparison of captured export payloads.

Usage:
    otel-golden compare received.json expected.json [--all] [--json]
    otel-golden check received.json chromium-vite-7-esnext-session.json [--golden-dir DIR] [--update]

Exit codes: 0 match, 1 mismatch, 2 unreadable or malformed input.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from comparison.policy import ComparisonPolicy
from comparison.tree import compare
from core.config import settings
from core.errors import GoldenFileError, GoldenMismatchError, PayloadShapeError
from core.logging import configure_logging
from golden.file_store import FileGoldenStore
from golden.matcher import match_golden
from schemas.payload import resource_groups_for, signal_kind_of

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def _load_payload(path: str) -> Dict[str, Any]:
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise GoldenFileError(f"Failed to load {file_path}: {e}", path=file_path) from e
    if not isinstance(data, dict):
        raise GoldenFileError(f"{file_path} must hold a JSON object", path=file_path)
    return data


def _run_compare(args: argparse.Namespace) -> int:
    received_data = _load_payload(args.received)
    expected_data = _load_payload(args.expected)

    kind = signal_kind_of(received_data)
    result = compare(
        resource_groups_for(received_data, kind),
        resource_groups_for(expected_data, kind),
        ComparisonPolicy.from_settings(),
        fail_fast=not args.all,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print(result.message)
    return EXIT_MATCH if result.passed else EXIT_MISMATCH


def _run_check(args: argparse.Namespace) -> int:
    payload = _load_payload(args.received)
    store = FileGoldenStore(args.golden_dir or settings.golden_dir)

    try:
        outcome = match_golden(payload, args.name, store, update=args.update or None)
    except GoldenMismatchError as e:
        print(str(e))
        return EXIT_MISMATCH

    print(outcome.message)
    return EXIT_MATCH


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="otel-golden", description="OTel golden file comparison")
    parser.add_argument("--log-level", default=None, help="Override OTEL_GOLDEN_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare_parser = subparsers.add_parser("compare", help="Compare two export payload files")
    compare_parser.add_argument("received", help="Payload captured from the live page")
    compare_parser.add_argument("expected", help="Expected payload (e.g. a golden file)")
    compare_parser.add_argument("--all", action="store_true", help="Report every mismatch, not just the first")
    compare_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    compare_parser.set_defaults(handler=_run_compare)

    check_parser = subparsers.add_parser("check", help="Check a payload file against the golden store")
    check_parser.add_argument("received", help="Payload captured from the live page")
    check_parser.add_argument("name", help="Golden file name, e.g. chromium-vite-7-esnext-session.json")
    check_parser.add_argument("--golden-dir", default=None, help="Golden directory (default: OTEL_GOLDEN_GOLDEN_DIR)")
    check_parser.add_argument("--update", action="store_true", help="Overwrite the golden file on mismatch")
    check_parser.set_defaults(handler=_run_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.handler(args)
    except (GoldenFileError, PayloadShapeError) as e:
        logger.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
