"""Structured logging for the tree-outline command.

Only the CLI configures logging. Library callers of print_tree get no log
output; the loaders log the events below once the CLI has set things up:

- input_loaded / input_load_failed: document path and format
- config_loaded / config_load_failed: config path and tag field
- tree_rendered: line count, outline and colour settings (DEBUG)
"""

import os
from pathlib import Path
from typing import Any

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def log_file_path() -> Path:
    """Location of the JSON-lines log, under the user's cache directory."""
    return Path.home() / ".cache" / "tree-outline" / "logs" / "tree-outline.log"


def resolve_log_level(verbose: bool = False) -> str:
    """Level from TREE_OUTLINE_LOG_LEVEL; unknown names mean INFO, verbose means DEBUG."""
    if verbose:
        return "DEBUG"
    level = os.environ.get("TREE_OUTLINE_LOG_LEVEL", "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def configure_logging(verbose: bool = False) -> None:
    """Send structlog events as JSON lines to the tree-outline log file.

    Args:
        verbose: Log DEBUG events (e.g. tree_rendered) whatever the environment says

    Example:
        TREE_OUTLINE_LOG_LEVEL=DEBUG tree-outline ast.json
        tail -f ~/.cache/tree-outline/logs/tree-outline.log | jq .
    """
    log_file = log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(verbose)),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=log_file.open("a", encoding="utf-8")),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Structured logger for a module, e.g. `get_logger(__name__)`."""
    return structlog.get_logger(name)
