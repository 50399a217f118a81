"""Logic for loading jsdoc symbol dumps."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Keys under which wrapped dumps keep their symbol list.
WRAPPER_KEYS = ("docs", "symbols")


class SymbolDocumentError(ValueError):
    """Raised when a dump does not contain a list of symbol records."""


def load_symbols(path: Path) -> list[dict[str, Any]]:
    """Load a jsdoc JSON (or YAML) dump into a list of symbol records.

    The dump is either a top-level list or a mapping holding the list under
    ``docs`` or ``symbols``. Non-mapping entries are dropped.
    """
    text = path.read_text(encoding="utf-8")
    doc = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    if isinstance(doc, dict):
        for key in WRAPPER_KEYS:
            if isinstance(doc.get(key), list):
                doc = doc[key]
                break
    if not isinstance(doc, list):
        msg = f"{path}: expected a list of symbols, got {type(doc).__name__}"
        raise SymbolDocumentError(msg)

    symbols = [s for s in doc if isinstance(s, dict)]
    dropped = len(doc) - len(symbols)
    if dropped:
        logger.warning("Skipped %d non-object entries in %s", dropped, path)
    logger.info("Loaded %d top-level symbols from %s", len(symbols), path)
    return symbols
