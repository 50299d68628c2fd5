"""Exceptions raised outside the rendering core.

The renderer itself degrades instead of raising; these cover loading input
documents and configuration.
"""


class TreeOutlineError(Exception):
    """Base class for tree-outline errors."""


class InputLoadError(TreeOutlineError):
    """Raised when an input document cannot be read or decoded.

    Attributes:
        path: Path (or "<stdin>") of the offending input
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str = "Could not load input"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ConfigError(TreeOutlineError):
    """Raised when configuration is malformed or fails validation."""
