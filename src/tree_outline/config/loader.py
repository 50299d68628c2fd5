"""Configuration loader with YAML and environment variable support.

This module reads ~/.config/tree-outline/config.yaml (if it exists) and
applies environment variable overrides using the TREE_OUTLINE_* prefix.

Environment variables:
- TREE_OUTLINE_TAG_FIELD: Override the discriminant field name
- TREE_OUTLINE_IGNORE: Comma-separated property names to hide
- TREE_OUTLINE_OUTLINE: "true"/"false" to toggle connector glyphs
- TREE_OUTLINE_COLOR: auto, always or never
- TREE_OUTLINE_INLINE_SINGLE_ENTRY: "true"/"false"
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from tree_outline.exceptions import ConfigError
from tree_outline.models.config import OutlineConfig
from tree_outline.nodes import is_list_like, tag_getter
from tree_outline.utils.logging import get_logger
from tree_outline.walker import WalkerSetup

logger = get_logger(__name__)

ENV_OVERRIDES = {
    "TREE_OUTLINE_TAG_FIELD": "tag_field",
    "TREE_OUTLINE_IGNORE": "ignore",
    "TREE_OUTLINE_OUTLINE": "outline",
    "TREE_OUTLINE_COLOR": "color",
    "TREE_OUTLINE_INLINE_SINGLE_ENTRY": "inline_single_entry",
}


def load_config(config_path: Optional[Path] = None) -> OutlineConfig:
    """Load configuration from YAML file with environment variable overrides.

    A missing config file is not an error: every setting has a default.

    Args:
        config_path: Path to config file. If None, uses ~/.config/tree-outline/config.yaml

    Returns:
        Validated OutlineConfig

    Raises:
        ConfigError: If the YAML is malformed or a value fails validation
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "tree-outline" / "config.yaml"

    data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {config_path} must be a mapping")

    data = _apply_env_overrides(data)

    try:
        config = OutlineConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed:\n{e}") from e

    logger.debug("config_loaded", path=str(config_path), tag_field=config.tag_field)
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply TREE_OUTLINE_* environment variables on top of file data.

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        New dictionary with environment overrides applied
    """
    data = dict(data)
    for env_name, key in ENV_OVERRIDES.items():
        if env_value := os.getenv(env_name):
            data[key] = env_value
    return data


def build_setup(config: OutlineConfig) -> WalkerSetup:
    """Build the walker setup described by a configuration.

    The tag field itself is always hidden, whatever the ignore list says.
    """
    ignored = frozenset(config.ignore) | {config.tag_field}

    return WalkerSetup(
        get_tag=tag_getter(config.tag_field),
        is_list=is_list_like,
        ignore_property=ignored.__contains__,
        outline=config.outline,
        inline_single_entry=config.inline_single_entry,
    )
