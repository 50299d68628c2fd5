"""Configuration model for the tree-outline command line tool."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from tree_outline.nodes import DEFAULT_IGNORED_PROPERTIES, DEFAULT_TAG_FIELD


class ColorMode(str, Enum):
    """When to colour output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutlineConfig(BaseModel):
    """Rendering configuration loaded from YAML and the environment."""

    tag_field: str = Field(
        default=DEFAULT_TAG_FIELD,
        min_length=1,
        description="Field holding a node's discriminant"
    )

    ignore: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_IGNORED_PROPERTIES),
        description="Property names never rendered"
    )

    outline: bool = Field(
        default=True,
        description="Draw box-drawing connectors"
    )

    inline_single_entry: bool = Field(
        default=False,
        description="Print a node's only entry on the tag's line"
    )

    color: ColorMode = Field(
        default=ColorMode.AUTO,
        description="Colour output: auto (TTY only), always or never"
    )

    @field_validator("ignore", mode="before")
    @classmethod
    def split_ignore(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    model_config = {"frozen": True}
