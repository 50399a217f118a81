"""Inspect jsdoc symbol dumps from the command line.

Loads a jsdoc JSON dump, then looks symbols up by name, lists their
classification labels, or writes a JSON report.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from src.classify_symbol import classify_symbol
from src.get_full_name import get_full_name
from src.get_name import get_name
from src.get_symbol_by_name import get_symbol_by_name
from src.iter_symbols import iter_symbols
from src.load_config import compute_config_hash, load_config
from src.load_symbols import SymbolDocumentError, load_symbols
from src.symbol_report import SymbolReport

logger = logging.getLogger(__name__)

EXIT_LOAD_ERROR = 1
EXIT_NOT_FOUND = 2


def describe_symbol(symbol: dict[str, Any]) -> dict[str, Any]:
    """Summarize a symbol as longname, full name, short name and labels."""
    return {
        "longname": symbol["longname"],
        "full_name": get_full_name(symbol),
        "name": get_name(symbol),
        "labels": classify_symbol(symbol),
    }


def find_all(
    symbols: list[dict[str, Any]], name: str, limit: int
) -> list[dict[str, Any]]:
    """Return up to ``limit`` symbols matching ``name``, in lookup order."""
    matches = []
    for s in iter_symbols(symbols):
        if len(matches) >= limit:
            break
        if name in (s.get("name"), s.get("longname"), get_full_name(s)):
            matches.append(s)
    return matches


def run_inspection(args: argparse.Namespace) -> int:
    """Execute the requested inspection and return the exit status."""
    config = load_config(args.config)
    try:
        symbols = load_symbols(args.symbols)
    except (OSError, SymbolDocumentError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("Could not load %s: %s", args.symbols, e)
        return EXIT_LOAD_ERROR

    if args.find:
        symbol = get_symbol_by_name(symbols, args.find)
        if symbol is None:
            logger.error("No symbol named %r", args.find)
            return EXIT_NOT_FOUND
        print(json.dumps(describe_symbol(symbol), indent=2))
        return 0

    if args.find_all:
        limit = int(config["lookup"]["max_results"])
        matches = find_all(symbols, args.find_all, limit)
        if not matches:
            logger.error("No symbol named %r", args.find_all)
            return EXIT_NOT_FOUND
        for s in matches:
            print(s["longname"])
        return 0

    if args.report:
        report = SymbolReport(compute_config_hash(config), config)
        for s in iter_symbols(symbols):
            report.add_symbol(s)
        report.generate_report(str(args.report))
        return 0

    for s in iter_symbols(symbols):
        print(f"{get_full_name(s)}: {', '.join(classify_symbol(s)) or '-'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the inspection."""
    ap = argparse.ArgumentParser(
        description="Inspect and classify symbols from a jsdoc JSON dump.",
    )
    ap.add_argument(
        "symbols",
        type=Path,
        help="jsdoc JSON (or YAML) dump: a list of symbols with optional $members",
    )
    action = ap.add_mutually_exclusive_group()
    action.add_argument(
        "--find",
        metavar="NAME",
        help="Print the first symbol whose name, longname or full name is NAME",
    )
    action.add_argument(
        "--find-all",
        metavar="NAME",
        help="Print the longname of every symbol matching NAME",
    )
    action.add_argument(
        "--report",
        type=Path,
        metavar="OUT",
        help="Write a JSON classification report to OUT",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run_inspection(args)


if __name__ == "__main__":
    raise SystemExit(main())
