"""Pydantic models for tree-outline options and configuration."""

from tree_outline.models.options import Decorate, PrintOptions, identity
from tree_outline.models.config import ColorMode, OutlineConfig

__all__ = [
    "Decorate",
    "PrintOptions",
    "identity",
    "ColorMode",
    "OutlineConfig",
]
