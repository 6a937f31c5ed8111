from __future__ import annotations

"""Base Node class for maybechain steps."""

from typing import TYPE_CHECKING, Callable

from maybechain.core.maybe import Maybe
from maybechain.core.result import State

if TYPE_CHECKING:
    from maybechain.sinks import ProgressSink

__all__ = ["Node"]


class Node:  # noqa: D101 – minimalist base class
    id: str
    name: str

    def execute(
        self,
        data: State,
        sink: "ProgressSink",
        *,
        run_id: str = "",
    ) -> Maybe[State]:
        """Run the node on *data* and return the next state (or absence)."""
        raise NotImplementedError

    def bind(self, sink: "ProgressSink", *, run_id: str = "") -> Callable[[State], Maybe[State]]:
        """Return the one-argument callable that ``Maybe.chain`` expects."""

        def _bound(data: State) -> Maybe[State]:
            return self.execute(data, sink, run_id=run_id)

        _bound.__name__ = self.id
        return _bound
