"""Logic for labelling a symbol with every predicate that holds for it."""

from collections.abc import Callable
from typing import Any

from src import symbol_predicates as p

PREDICATES: dict[str, Callable[[dict[str, Any]], bool]] = {
    "global": p.is_global,
    "namespace": p.is_namespace,
    "class": p.is_class,
    "constructor": p.is_constructor,
    "static-member": p.is_static_member,
    "instance-member": p.is_instance_member,
    "method": p.is_method,
    "instance-method": p.is_instance_method,
    "static-method": p.is_static_method,
    "property": p.is_property,
    "instance-property": p.is_instance_property,
    "static-property": p.is_static_property,
    "enum": p.is_enum,
    "read-only": p.is_read_only,
    "undocumented": p.is_undocumented,
    "has-description": p.has_description,
}


def classify_symbol(symbol: dict[str, Any]) -> list[str]:
    """Return the labels of all predicates that hold, in declaration order."""
    return [label for label, predicate in PREDICATES.items() if predicate(symbol)]
