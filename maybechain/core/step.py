from __future__ import annotations

"""maybechain Step implementation.

A *Step* wraps a plain function ``(state, sink) -> Maybe[state]`` so it can
be placed in a :class:`~maybechain.core.chain.Chain`.  The function narrates
its work through *sink*; the Step adds lifecycle events and debug logging.
"""

from typing import Callable

from maybechain.core.maybe import Maybe
from maybechain.core.node import Node
from maybechain.core.result import State
from maybechain.sinks import ProgressSink
from maybechain.utils.events import publish, StepStarted, StepFinished
from maybechain.utils.ids import snake_case
from maybechain.utils.logging import log

StepFn = Callable[[State, ProgressSink], Maybe[State]]

__all__ = ["Step", "StepFn", "step"]


class Step(Node):
    def __init__(
        self,
        fn: StepFn,
        *,
        id: str | None = None,
        name: str | None = None,
        description: str = "",
    ) -> None:
        fn_name = getattr(fn, "__name__", None)
        if id is None and fn_name is None:
            raise ValueError("Step needs an explicit id when fn has no __name__")
        self.fn = fn
        self.id = id or snake_case(fn_name)  # type: ignore[arg-type]
        self.name = name or self.id.replace("_", " ").title()
        self.description = description.strip()

    def __repr__(self) -> str:
        return f"Step(id={self.id!r})"

    # -------------------------------------------------- #

    def execute(
        self,
        data: State,
        sink: ProgressSink,
        *,
        run_id: str = "",
    ) -> Maybe[State]:
        log.debug("run %s: step %s <- %r", run_id, self.id, data)
        publish(StepStarted(run_id=run_id, step_id=self.id, data=data))

        result = self.fn(data, sink)
        if not isinstance(result, Maybe):
            raise TypeError(
                f"Step '{self.id}' must return a Maybe, got {type(result).__name__}"
            )

        ok = result.is_present
        log.debug("run %s: step %s -> %r", run_id, self.id, result)
        publish(
            StepFinished(
                run_id=run_id,
                step_id=self.id,
                ok=ok,
                value=result.extract() if ok else None,
            )
        )
        return result


# Convenience helpers ------------------------------------------------------- #

def step(
    fn: StepFn | None = None,
    *,
    id: str | None = None,
    name: str | None = None,
    description: str = "",
):  # noqa: D401
    """Return a :class:`Step` from *fn*; usable bare or as ``@step(id=...)``."""

    def _wrap(f: StepFn) -> Step:
        return Step(f, id=id, name=name, description=description or (f.__doc__ or ""))

    if fn is not None:
        return _wrap(fn)
    return _wrap
