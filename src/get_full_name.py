"""Logic for picking the most qualified name of a symbol."""

import re
from typing import Any

from src.notate import notate

# Everything except the path separators jsdoc puts in long names.
NON_SEPARATOR_RE = re.compile(r"[^#.~]")


def _separator_count(name: str) -> int:
    return len(NON_SEPARATOR_RE.sub("", name))


def get_full_name(symbol: dict[str, Any]) -> str:
    """Get the full code-name of the given symbol.

    Aliased symbols keep their original path only at ``meta.code.name``. That
    name wins when it is at least as deeply qualified as ``longname``;
    without one, ``longname`` is returned. ``longname`` is required.
    """
    longname = symbol["longname"]
    code_name = notate(symbol, "meta.code.name")
    if not code_name:
        return longname
    if _separator_count(code_name) >= _separator_count(longname):
        return code_name
    return longname
