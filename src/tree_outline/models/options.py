"""Option models for the public print_tree entry point."""

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator


def identity(text: str) -> str:
    """Decoration hook that returns its input unchanged."""
    return text


class Decorate(BaseModel):
    """Per-token-kind text transforms.

    Each hook takes the raw token text and returns the text to print.
    Hooks that are missing or not callable fall back to identity. Besides a
    mapping, any object carrying the hooks as attributes is accepted.
    """

    tag: Callable[[str], str] = Field(default=identity, description="Node tags")
    index: Callable[[str], str] = Field(default=identity, description="List indexes like [0]")
    property: Callable[[str], str] = Field(default=identity, description="Property names")
    colon: Callable[[str], str] = Field(default=identity, description="Colon after a property name")
    value: Callable[[str], str] = Field(default=identity, description="Scalar values")
    outline: Callable[[str], str] = Field(default=identity, description="Outline prefixes")

    model_config = {"frozen": True, "from_attributes": True}

    @field_validator("*", mode="before")
    @classmethod
    def default_to_identity(cls, v: Any) -> Callable[[str], str]:
        """Replace non-callable hooks with identity."""
        return v if callable(v) else identity


class PrintOptions(BaseModel):
    """Options accepted by print_tree."""

    decorate: Decorate = Field(
        default_factory=Decorate,
        description="Decoration hooks applied to each token kind"
    )

    outline: bool = Field(
        default=True,
        description="Draw box-drawing connectors (False uses plain indentation)"
    )

    model_config = {"frozen": True}

    @field_validator("decorate", mode="before")
    @classmethod
    def coerce_decorate(cls, v: Any) -> Any:
        """Accept None as 'no decoration' and objects carrying hooks as attributes."""
        if v is None:
            return Decorate()
        if isinstance(v, (Decorate, Mapping)):
            return v
        return Decorate.model_validate(v)
