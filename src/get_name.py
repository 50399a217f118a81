"""Logic for extracting the short code-name of a symbol."""

import re
from typing import Any

from src.notate import notate

TRAILING_SEGMENT_RE = re.compile(r".*?[#.~](\w+)$")


def get_name(symbol: dict[str, Any]) -> str:
    """Get the (short) code-name of the given symbol."""
    # With @alias the original (long) name only lives at meta.code.name.
    name = notate(symbol, "meta.code.name")
    if name:
        return TRAILING_SEGMENT_RE.sub(r"\1", name)
    return symbol.get("name", "")
