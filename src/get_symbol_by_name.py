"""Lookup of documentation symbols by name."""

from collections.abc import Iterable
from typing import Any

from src.get_full_name import get_full_name
from src.iter_symbols import iter_symbols


def get_symbol_by_name(
    symbols: Iterable[dict[str, Any]], name: str
) -> dict[str, Any] | None:
    """Get the first symbol whose name, longname or full name equals ``name``.

    Nested ``$members`` are searched depth-first before the next sibling.
    """
    for symbol in iter_symbols(symbols):
        if (
            symbol.get("name") == name
            or symbol.get("longname") == name
            or get_full_name(symbol) == name
        ):
            return symbol
    return None
