"""Default node-shape accessors for Python values.

Parsed trees usually arrive as nested dicts (from JSON or YAML) but may also
be dataclasses or plain objects. These helpers give the walker a uniform view:
a discriminant, a list predicate, the node's own properties and a textual
form for scalars.
"""

import dataclasses
import json
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

DEFAULT_TAG_FIELD = "type"

# Discriminant plus source-location bookkeeping of parsed-syntax nodes
DEFAULT_IGNORED_PROPERTIES = frozenset({"type", "loc", "start", "end"})


def tag_getter(field: str = DEFAULT_TAG_FIELD) -> Callable[[Any], Optional[str]]:
    """Build a discriminant that reads `field` from a mapping or an attribute."""

    def get_tag(value: Any) -> Optional[str]:
        if isinstance(value, Mapping):
            return value.get(field)
        return getattr(value, field, None)

    return get_tag


get_type_tag = tag_getter(DEFAULT_TAG_FIELD)


def is_list_like(value: Any, name: str) -> bool:
    """Default list predicate: a list or tuple, or a property named children."""
    return isinstance(value, (list, tuple)) or name == "children"


def ignore_default_property(name: str) -> bool:
    return name in DEFAULT_IGNORED_PROPERTIES


def iter_properties(node: Any) -> list[tuple[str, Any]]:
    """Return a node's own properties in insertion order.

    Args:
        node: Mapping, dataclass instance or plain object

    Returns:
        (name, value) pairs; empty for values without properties
    """
    if isinstance(node, Mapping):
        return [(str(key), value) for key, value in node.items()]
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        return [(f.name, getattr(node, f.name)) for f in dataclasses.fields(node)]
    if hasattr(node, "__dict__"):
        return list(vars(node).items())
    return []


def format_scalar(value: Any) -> str:
    """Textual form of a scalar: strings JSON-quoted, JSON literals for bool/None."""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def materialize(items: Any) -> list[Any]:
    """Return list elements in forward order.

    None and values that cannot be iterated (e.g. `children: 0`) count as an
    empty list, so a bad value only affects its own line.
    """
    if not isinstance(items, Iterable):
        return []
    return list(items)
