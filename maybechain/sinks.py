from __future__ import annotations
"""Progress and result sinks.

The chain never renders anything itself.  It talks to two callables:

* a *progress sink* ``(text, failed) -> None`` receiving narration lines in
  the order they are produced,
* a *result sink* ``(value) -> None`` receiving exactly one value per run:
  the final number, or :data:`~maybechain.core.result.FAILURE_DISPLAY`.

:class:`ListSink` records both in memory (tests, embedding); :class:`RichSink`
prints them to a terminal.
"""
from dataclasses import dataclass
from typing import Any, List, Protocol, Union

from rich.console import Console
from rich.markup import escape

from maybechain.core.result import State
from maybechain.utils.constants import SYMBOLS, STYLE

__all__ = [
    "ProgressMessage",
    "ProgressSink",
    "ResultSink",
    "ListSink",
    "RichSink",
    "null_progress",
]


@dataclass(frozen=True, slots=True)
class ProgressMessage:  # noqa: D101
    text: str
    failed: bool = False


class ProgressSink(Protocol):  # noqa: D101
    def __call__(self, text: str, failed: bool = False) -> None: ...


class ResultSink(Protocol):  # noqa: D101
    def __call__(self, value: Union[State, str]) -> None: ...


def null_progress(text: str, failed: bool = False) -> None:  # noqa: D401
    """Progress sink that drops everything."""


class ListSink:
    """Append-only in-memory recorder for progress lines and results."""

    def __init__(self) -> None:
        self.messages: List[ProgressMessage] = []
        self.results: List[Any] = []

    def __call__(self, text: str, failed: bool = False) -> None:
        self.messages.append(ProgressMessage(text=text, failed=failed))

    def publish_result(self, value: Union[State, str]) -> None:
        self.results.append(value)

    # ------------------------------------------------------------------ #
    @property
    def texts(self) -> List[str]:  # noqa: D401
        return [m.text for m in self.messages]

    @property
    def failures(self) -> List[ProgressMessage]:  # noqa: D401
        return [m for m in self.messages if m.failed]

    @property
    def result(self) -> Any:  # noqa: D401
        """Last published result (None before any run)."""
        return self.results[-1] if self.results else None


class RichSink:
    """Print progress lines and the final result through a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, text: str, failed: bool = False) -> None:
        if failed:
            self.console.print(f"{SYMBOLS['error']}[{STYLE['error']}]{escape(text)}[/]")
        else:
            self.console.print(f"{SYMBOLS['success']}[{STYLE['success']}]{escape(text)}[/]")

    def publish_result(self, value: Union[State, str]) -> None:
        style = STYLE["value"] if not isinstance(value, str) else STYLE["error"]
        self.console.print(f"{SYMBOLS['result']}[bold]Final Value:[/] [{style}]{escape(str(value))}[/]")
