from __future__ import annotations
"""Rich-backed logging for maybechain.

Progress narration goes to the injected sinks; this logger only carries
diagnostics (state transitions, misbehaving event handlers).
"""
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig

from rich.console import Console
from rich.logging import RichHandler

console = Console()

__all__ = ["console", "get", "log"]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

# Configure root once with Rich handler for plain log messages
basicConfig(
    level=INFO,
    format="%(message)s",
    datefmt="%H:%M:%S",
    handlers=[RichHandler(rich_tracebacks=True, markup=True)],
)

log: Logger = getLogger("maybechain")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("maybechain")
    lg.setLevel(lvl)
    return lg
