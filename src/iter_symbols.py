"""Utility for walking a forest of documentation symbols."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

MEMBERS_KEY = "$members"

_EXHAUSTED = object()


def iter_symbols(symbols: Iterable[Any]) -> Iterator[dict[str, Any]]:
    """Yield every symbol in pre-order: node, its ``$members``, next sibling.

    Entries that are not mappings are skipped. A symbol reachable twice (a
    cyclic ``$members`` chain) is only yielded once.
    """
    seen: set[int] = set()
    stack: list[Iterator[Any]] = [iter(symbols)]
    while stack:
        symbol = next(stack[-1], _EXHAUSTED)
        if symbol is _EXHAUSTED:
            stack.pop()
            continue
        if not isinstance(symbol, Mapping) or id(symbol) in seen:
            continue
        seen.add(id(symbol))
        yield symbol  # type: ignore[misc]
        members = symbol.get(MEMBERS_KEY)
        if isinstance(members, list) and members:
            stack.append(iter(members))
