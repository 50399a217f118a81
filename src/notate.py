"""Resolve dotted attribute paths against nested symbol records."""

from collections.abc import Mapping, Sequence
from typing import Any


def notate(obj: object, notation: str | Sequence[str]) -> Any:
    """Return the value at ``notation`` inside ``obj``, or None.

    ``notation`` is either a dotted path such as ``"meta.code.type"`` or an
    already-split sequence of segment names. Missing segments, empty paths and
    non-mapping intermediates all resolve to None.
    """
    props = notation.split(".") if isinstance(notation, str) else notation
    if not props:
        return None
    current: Any = obj
    for prop in props:
        if not prop or not isinstance(current, Mapping):
            return None
        current = current.get(prop)
    return current
