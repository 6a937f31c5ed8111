from __future__ import annotations

"""Chain orchestration for maybechain."""

from typing import List

from maybechain.core.maybe import Maybe, unit
from maybechain.core.node import Node
from maybechain.core.result import State
from maybechain.sinks import ProgressSink

__all__ = ["Chain"]


class Chain:
    def __init__(
        self,
        *,
        name: str,
        steps: List[Node],
        emoji: str | None = None,
    ) -> None:
        if not steps:
            raise ValueError("Chain has no executable nodes.")
        self.name = name
        self.steps = list(steps)
        self.emoji = emoji or ""

    def __repr__(self) -> str:
        return f"Chain(name={self.name!r}, steps={[s.id for s in self.steps]!r})"

    # ------------------------------------------------------------------ #

    def run(self, initial: State, sink: ProgressSink, *, run_id: str = "") -> Maybe[State]:
        """Seed ``unit(initial)`` and chain every step in order.

        A step that returns absence stops the chain: later steps are never
        called and the absence is returned as-is.
        """
        container: Maybe[State] = unit(initial)
        for node in self.steps:
            container = container.chain(node.bind(sink, run_id=run_id))
        return container
