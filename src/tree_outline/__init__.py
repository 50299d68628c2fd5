"""tree-outline - Print tagged trees as box-drawing outlines.

This package renders any nested, tagged tree (typically a parsed syntax tree
loaded from JSON) into a deterministic outline, similar to a directory
listing.

Key features:
- Scalars first, then tagged children, then lists, whatever the source order
- Box-drawing connectors that mark the last child of every node
- Per-token decoration hooks (e.g. ANSI colours) that never affect spacing
- Configurable discriminant, list predicate and hidden properties

Example:
    >>> from tree_outline import print_tree
    >>> print(print_tree({"type": "Neg", "arg": {"type": "Num", "value": 1}}), end="")
    Neg
    └─ arg: Num
       └─ value: 1
"""

__version__ = "0.1.0"

from tree_outline.models.options import Decorate, PrintOptions
from tree_outline.printer import Printer, TokenKind
from tree_outline.renderer import print_tree, render_with_setup
from tree_outline.walker import NodeKind, WalkerSetup, classify, render

__all__ = [
    "Decorate",
    "PrintOptions",
    "Printer",
    "TokenKind",
    "print_tree",
    "render_with_setup",
    "NodeKind",
    "WalkerSetup",
    "classify",
    "render",
]
