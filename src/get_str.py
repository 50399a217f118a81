"""Normalize optional description strings."""


def get_str(value: object) -> str | None:
    """Return ``value`` if it is a string with non-whitespace content."""
    if isinstance(value, str) and value.strip():
        return value
    return None
