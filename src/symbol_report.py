"""Logic for generating classification reports over symbol dumps."""

import json
import logging
import time
from pathlib import Path
from typing import Any

from src.classify_symbol import PREDICATES, classify_symbol
from src.get_full_name import get_full_name
from src.get_name import get_name
from src.symbol_predicates import has_description, is_undocumented

logger = logging.getLogger(__name__)


class SymbolReport:
    """Collects classified symbols and summarizes them as JSON."""

    def __init__(self, config_hash: str, config: dict[str, Any]) -> None:
        """Initialize the report with the active configuration."""
        self.config_hash = config_hash
        report_cfg = config.get("report", {})
        self.include_undocumented = report_cfg.get("include_undocumented", True)
        self.labels = set(report_cfg.get("labels") or PREDICATES)
        self.symbols: list[dict[str, Any]] = []
        self.start_time = time.time()

    def add_symbol(self, symbol: dict[str, Any]) -> None:
        """Add a single symbol to the report."""
        self.symbols.append(symbol)

    def entries(self) -> list[dict[str, Any]]:
        """Build the per-symbol entries, honoring the report filters."""
        out = []
        for s in self.symbols:
            if not self.include_undocumented and is_undocumented(s):
                continue
            out.append(
                {
                    "longname": s["longname"],
                    "full_name": get_full_name(s),
                    "name": get_name(s),
                    "labels": [
                        label for label in classify_symbol(s) if label in self.labels
                    ],
                }
            )
        return out

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        entries = self.entries()
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_symbols": len(self.symbols),
            },
            "symbols": entries,
            "stats": self._compute_stats(entries),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Wrote report for %d symbols to %s", len(entries), path)

    def _compute_stats(self, entries: list[dict[str, Any]]) -> dict[str, Any]:
        label_counts: dict[str, int] = {}
        for e in entries:
            for label in e["labels"]:
                label_counts[label] = label_counts.get(label, 0) + 1

        return {
            "label_counts": label_counts,
            "undocumented": [
                s["longname"] for s in self.symbols if is_undocumented(s)
            ],
            "missing_description": [
                s["longname"] for s in self.symbols if not has_description(s)
            ],
        }
