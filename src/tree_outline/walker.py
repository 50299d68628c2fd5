"""Recursive tree walker that drives a Printer.

The walker classifies every value into one of three kinds (scalar, tagged
node, list), orders a tagged node's properties as scalars, then tagged
children, then lists, and computes the outline prefix of every line from the
ancestry of the node being printed.

Example:
    >>> printer = Printer()
    >>> render({"type": "Num", "value": 1}, WalkerSetup(), printer)
    >>> printer.emit()
    'Num\\n└─ value: 1\\n'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from tree_outline.nodes import (
    format_scalar,
    get_type_tag,
    ignore_default_property,
    is_list_like,
    iter_properties,
    materialize,
)
from tree_outline.printer import Printer

EMPTY_LIST = "<empty>"

# Connector glyphs: (blank, tee, bar, corner)
OUTLINE_GLYPHS = ("  ", "├─", "│ ", "└─")
PLAIN_GLYPHS = (" ", " ", " ", " ")


class NodeKind(Enum):
    SCALAR = "scalar"
    TAGGED = "tagged"
    LIST = "list"


@dataclass(frozen=True)
class WalkerSetup:
    """Engine configuration.

    Attributes:
        get_tag: Discriminant; a non-empty string marks a tagged node.
                 None makes every value a scalar.
        is_list: Predicate called with (value, property name)
        ignore_property: Properties for which this returns True are not rendered
        outline: Draw connector glyphs instead of plain spaces
        inline_single_entry: Print a node's only entry on the tag's line
    """

    get_tag: Optional[Callable[[Any], Optional[str]]] = get_type_tag
    is_list: Callable[[Any, str], bool] = is_list_like
    ignore_property: Callable[[str], bool] = ignore_default_property
    outline: bool = True
    inline_single_entry: bool = False


def _tag_of(setup: WalkerSetup, value: Any) -> Optional[str]:
    if setup.get_tag is None:
        return None
    tag = setup.get_tag(value)
    return tag if isinstance(tag, str) and tag else None


def classify(setup: WalkerSetup, value: Any, name: Optional[str] = None) -> NodeKind:
    """Map a value to its node kind.

    Tagged wins over list, list wins over scalar. The root and list elements
    have no property name and are never lists themselves.
    """
    if _tag_of(setup, value) is not None:
        return NodeKind.TAGGED
    if name is not None and setup.is_list(value, name):
        return NodeKind.LIST
    return NodeKind.SCALAR


def render(root: Any, setup: WalkerSetup, printer: Printer) -> None:
    """Walk `root` depth-first and emit its outline into `printer`.

    Cyclic input is not supported and recurses until RecursionError.
    """
    blank, tee, bar, corner = OUTLINE_GLYPHS if setup.outline else PLAIN_GLYPHS
    # Off-mode list elements keep one more space so children stay aligned
    element_pad = "" if setup.outline else " "

    def render_value(value: Any) -> None:
        printer.value(format_scalar(value))
        printer.newline()

    def render_node(
        node: Any,
        self_prefix: str = "",
        nested: str = "",
        index: Optional[int] = None,
        skip_tag: bool = False,
    ) -> None:
        tag = _tag_of(setup, node)

        if not skip_tag:
            printer.outline(self_prefix)

        if index is not None:
            printer.index(index)
            nested += " "

        if tag is None:
            render_value(node)
            return

        entries = [
            (name, value)
            for name, value in iter_properties(node)
            if not setup.ignore_property(name)
        ]

        if not skip_tag:
            printer.tag(tag)

        if len(entries) == 1 and setup.inline_single_entry:
            render_entries(entries, "", nested, single=True)
        else:
            printer.newline()
            render_entries(entries, nested, nested, single=False)

    def render_entries(
        entries: list[tuple[str, Any]], self_prefix: str, nested: str, single: bool
    ) -> None:
        scalars: list[tuple[str, Any]] = []
        tagged: list[tuple[str, Any]] = []
        lists: list[tuple[str, Any]] = []

        for name, value in entries:
            kind = classify(setup, value, name)
            if kind is NodeKind.TAGGED:
                tagged.append((name, value))
            elif kind is NodeKind.LIST:
                lists.append((name, value))
            else:
                scalars.append((name, value))

        ordered = scalars + tagged + lists
        if not ordered:
            return
        # Compared by identity: distinct keys may share a string form
        last_entry = ordered[-1]

        def connector(entry: tuple[str, Any]) -> str:
            if single:
                return ""
            return corner if entry is last_entry else tee

        def continuation(entry: tuple[str, Any]) -> str:
            if single:
                return ""
            return (blank if entry is last_entry else bar) + " "

        for entry in scalars:
            name, value = entry
            printer.outline(self_prefix + connector(entry))
            printer.property(name)
            render_value(value)

        for entry in tagged:
            name, child = entry
            printer.outline(self_prefix + connector(entry))
            printer.property(name)
            printer.tag(_tag_of(setup, child))
            # A single inlined entry still indents its child's entries one level
            child_nested = nested + (blank + " " if single else continuation(entry))
            render_node(child, nested=child_nested, skip_tag=True)

        for entry in lists:
            name, items = entry
            list_nested = continuation(entry)
            if not setup.outline:
                list_nested = list_nested[1:]
            render_list(name, items, self_prefix + connector(entry), nested + list_nested)

    def render_list(name: str, items: Any, self_prefix: str, nested: str) -> None:
        printer.outline(self_prefix)
        printer.property(name)

        elements = materialize(items)
        if not elements:
            printer.value(EMPTY_LIST)
            printer.newline()
            return

        printer.newline()

        last = len(elements) - 1
        for i, element in enumerate(elements):
            if i < last:
                render_node(element, nested + tee, nested + bar + element_pad, i)
            else:
                render_node(element, nested + corner, nested + blank + element_pad, i)

    render_node(root)
