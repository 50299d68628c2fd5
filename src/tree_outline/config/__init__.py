"""Configuration loading for tree-outline."""

from tree_outline.config.loader import build_setup, load_config

__all__ = ["build_setup", "load_config"]
