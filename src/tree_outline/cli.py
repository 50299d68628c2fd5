"""CLI entry point for tree-outline."""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click
import yaml

from tree_outline import __version__
from tree_outline.config import build_setup, load_config
from tree_outline.exceptions import ConfigError, InputLoadError
from tree_outline.models.config import ColorMode
from tree_outline.models.options import PrintOptions
from tree_outline.renderer import render_with_setup
from tree_outline.styles import ansi_decorate
from tree_outline.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def detect_format(name: str, fmt: str) -> str:
    """
    Resolve the input format.

    Args:
        name: Input file name ("-" or "<stdin>" for standard input)
        fmt: "auto", "json" or "yaml"

    Returns:
        "json" or "yaml"; auto picks YAML for .yaml/.yml files, JSON otherwise
    """
    if fmt != "auto":
        return fmt
    return "yaml" if Path(name).suffix.lower() in YAML_SUFFIXES else "json"


def load_document(text: str, name: str, fmt: str) -> Any:
    """
    Decode a JSON or YAML document.

    Args:
        text: Document text
        name: Input name used in error messages
        fmt: "json" or "yaml"

    Returns:
        Decoded document

    Raises:
        InputLoadError: If the text is not valid in the given format
    """
    try:
        if fmt == "yaml":
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputLoadError(name, f"Invalid {fmt.upper()} ({e})") from e

    logger.info("input_loaded", path=name, format=fmt)
    return document


def use_color(mode: ColorMode, stream: Any) -> bool:
    """Decide whether to colour output written to `stream`."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format", "fmt",
    type=click.Choice(["auto", "json", "yaml"]),
    default="auto",
    show_default=True,
    help="Input format (auto: by file extension, JSON otherwise)",
)
@click.option("--outline/--no-outline", default=None, help="Draw box-drawing connectors")
@click.option(
    "--inline-single-entry/--no-inline-single-entry",
    default=None,
    help="Print a node's only entry on the same line as its tag",
)
@click.option("--tag-field", help="Field holding each node's tag (default: type)")
@click.option("--ignore", multiple=True, help="Property name to hide (repeatable)")
@click.option(
    "--color",
    type=click.Choice([mode.value for mode in ColorMode]),
    help="Colour output (default: auto)",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/tree-outline/config.yaml)",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="tree-outline")
def main(
    source,
    fmt: str,
    outline: Optional[bool],
    inline_single_entry: Optional[bool],
    tag_field: Optional[str],
    ignore: tuple[str, ...],
    color: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
):
    """Print a JSON or YAML tree (e.g. a syntax tree) as an outline.

    Reads SOURCE, or standard input when SOURCE is omitted or "-".
    """
    configure_logging(verbose=verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error("config_load_failed", error=str(e))
        raise click.ClickException(str(e))

    overrides = {}
    if outline is not None:
        overrides["outline"] = outline
    if inline_single_entry is not None:
        overrides["inline_single_entry"] = inline_single_entry
    if tag_field:
        overrides["tag_field"] = tag_field
    if ignore:
        overrides["ignore"] = [*config.ignore, *ignore]
    if color:
        overrides["color"] = ColorMode(color)
    config = config.model_copy(update=overrides)

    name = getattr(source, "name", None)
    if not isinstance(name, str) or name in ("-", "<stdin>"):
        name = "<stdin>"
    try:
        document = load_document(source.read(), name, detect_format(name, fmt))
    except InputLoadError as e:
        logger.error("input_load_failed", path=e.path, error=e.message)
        raise click.ClickException(str(e))

    colored = use_color(config.color, sys.stdout)
    options = PrintOptions(
        outline=config.outline,
        decorate=ansi_decorate() if colored else None,
    )
    output = render_with_setup(document, build_setup(config), options)
    logger.debug(
        "tree_rendered",
        lines=output.count("\n"),
        outline=config.outline,
        inline_single_entry=config.inline_single_entry,
        color=colored,
    )
    click.echo(output, nl=False, color=colored)


if __name__ == "__main__":
    main()
