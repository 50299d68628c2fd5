"""ANSI colour decoration for terminal output."""

import click

from tree_outline.models.options import Decorate


def ansi_decorate() -> Decorate:
    """Decoration hooks that colour each token kind with ANSI escapes."""
    return Decorate(
        tag=lambda text: click.style(text, fg="cyan", bold=True),
        index=lambda text: click.style(text, fg="yellow"),
        property=lambda text: click.style(text, fg="green"),
        colon=lambda text: click.style(text, dim=True),
        outline=lambda text: click.style(text, dim=True),
    )
