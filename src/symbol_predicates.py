"""Predicates for classifying jsdoc symbols.

Every predicate takes one symbol record and returns a plain bool. Missing
fields never raise; they simply make the predicate false.
"""

from typing import Any

from src.get_str import get_str
from src.notate import notate

METHOD_CODE_TYPES = {"MethodDefinition", "FunctionExpression"}


def is_global(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol has global scope."""
    return symbol.get("scope") == "global"


def is_namespace(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a namespace."""
    return symbol.get("kind") == "namespace"


def is_class(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a class declaration."""
    return (
        symbol.get("kind") == "class"
        and notate(symbol, "meta.code.type") == "ClassDeclaration"
    )


def is_constructor(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a class constructor."""
    # jsdoc documents ES2015 constructors as kind "class" on the method node.
    return (
        symbol.get("kind") == "class"
        and notate(symbol, "meta.code.type") == "MethodDefinition"
    )


def is_static_member(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a static member."""
    return symbol.get("scope") == "static"


def is_instance_member(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is an instance member."""
    return symbol.get("scope") == "instance"


def is_method(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a method."""
    return (
        symbol.get("kind") == "function"
        and notate(symbol, "meta.code.type") in METHOD_CODE_TYPES
    )


def is_instance_method(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is an instance method."""
    return is_instance_member(symbol) and is_method(symbol)


def is_static_method(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a static method."""
    return is_static_member(symbol) and is_method(symbol)


def is_property(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a property."""
    return symbol.get("kind") == "member"


def is_instance_property(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is an instance property."""
    return is_instance_member(symbol) and is_property(symbol)


def is_static_property(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is a static property."""
    return is_static_member(symbol) and is_property(symbol)


def is_enum(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is an enumeration."""
    return bool(symbol.get("isEnum"))


def is_read_only(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol is read-only."""
    return bool(symbol.get("readonly"))


def is_undocumented(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol carries no doc comment at all.

    jsdoc's own ``undocumented`` flag is unreliable, so the raw ``comments``
    field is used instead. An empty comment still counts as documented.
    """
    return symbol.get("comments") is None


def has_description(symbol: dict[str, Any]) -> bool:
    """Check whether the symbol has a class or general description."""
    return bool(get_str(symbol.get("classdesc")) or get_str(symbol.get("description")))
