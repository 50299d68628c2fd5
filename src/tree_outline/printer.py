"""Token printer with adjacency-based spacing.

The walker never writes text directly. It feeds typed tokens into a Printer,
which decorates each token and decides from the kinds of two adjacent tokens
whether a single separating space goes between them.
"""

from enum import IntEnum
from typing import Optional

from tree_outline.models.options import Decorate


class TokenKind(IntEnum):
    """Kind of the most recently emitted token."""

    NONE = 0
    TAG = 1
    PROPERTY = 2
    INDEX = 3
    VALUE = 4
    OUTLINE = 5
    NEWLINE = 6


# Ordered (previous, following) pairs separated by one space
SPACED_PAIRS = frozenset(
    {
        (TokenKind.TAG, TokenKind.PROPERTY),
        (TokenKind.PROPERTY, TokenKind.VALUE),
        (TokenKind.PROPERTY, TokenKind.TAG),
        (TokenKind.INDEX, TokenKind.TAG),
        (TokenKind.INDEX, TokenKind.VALUE),
        (TokenKind.OUTLINE, TokenKind.TAG),
        (TokenKind.OUTLINE, TokenKind.PROPERTY),
    }
)


class Printer:
    """Accumulates decorated tokens into an output buffer.

    Spacing is computed from token kinds only, never from the decorated
    text, so decoration hooks may add escape codes freely.

    Attributes:
        decorate: Hooks applied to token text before it is appended
        previous: Kind of the last appended token
    """

    def __init__(self, decorate: Optional[Decorate] = None):
        self.decorate = decorate if decorate is not None else Decorate()
        self.previous = TokenKind.NONE
        self._colon = self.decorate.colon(":")
        self._parts: list[str] = []

    @staticmethod
    def spacing(previous: TokenKind, following: TokenKind) -> str:
        """Return the separator required between two adjacent token kinds."""
        return " " if (previous, following) in SPACED_PAIRS else ""

    def _put(self, kind: TokenKind, text: str) -> None:
        self._parts.append(self.spacing(self.previous, kind) + text)
        self.previous = kind

    def tag(self, text: str) -> None:
        self._put(TokenKind.TAG, self.decorate.tag(text))

    def index(self, index: int) -> None:
        self._put(TokenKind.INDEX, self.decorate.index(f"[{index}]"))

    def property(self, name: str) -> None:
        self._put(TokenKind.PROPERTY, self.decorate.property(name) + self._colon)

    def value(self, text: str) -> None:
        self._put(TokenKind.VALUE, self.decorate.value(text))

    def outline(self, prefix: str) -> None:
        """Append an outline prefix; empty prefixes leave the state untouched."""
        if prefix:
            self._put(TokenKind.OUTLINE, self.decorate.outline(prefix))

    def newline(self) -> None:
        self._put(TokenKind.NEWLINE, "\n")

    def emit(self) -> str:
        """Return everything printed so far."""
        return "".join(self._parts)
