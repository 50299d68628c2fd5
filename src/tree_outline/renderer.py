"""Public entry point for printing a tree as an outline."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from tree_outline.models.options import PrintOptions
from tree_outline.printer import Printer
from tree_outline.walker import WalkerSetup, render


def print_tree(
    root: Any,
    options: Optional[Union[PrintOptions, Mapping[str, Any]]] = None,
) -> str:
    """Render a tagged tree as an outline diagram.

    Nodes are tagged by their `type` field. Lists are list/tuple values and
    any property named `children`. The `type`, `loc`, `start` and `end`
    properties are never rendered.

    Args:
        root: Tree to render (nested dicts, dataclasses or plain objects)
        options: PrintOptions, or a mapping with `decorate` and `outline`

    Returns:
        Rendered outline, one line per leaf, ending with a newline

    Raises:
        pydantic.ValidationError: If options cannot be validated

    Example:
        >>> print(print_tree({"type": "Num", "value": 1}), end="")
        Num
        └─ value: 1
    """
    if options is None:
        options = PrintOptions()
    elif not isinstance(options, PrintOptions):
        options = PrintOptions.model_validate(dict(options))

    return render_with_setup(root, WalkerSetup(outline=options.outline), options)


def render_with_setup(root: Any, setup: WalkerSetup, options: PrintOptions) -> str:
    """Render with a custom engine setup (tag field, ignored properties, ...).

    Only `options.decorate` is used here; outline mode comes from `setup`.
    """
    printer = Printer(options.decorate)
    render(root, setup, printer)
    return printer.emit()
