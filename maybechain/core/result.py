from __future__ import annotations
"""Terminal outcome of one chain run.

The state is carried explicitly so a successful ``0`` is never read as a
failure.  Only the runner builds these.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

__all__ = ["State", "RunState", "Outcome", "FAILURE_DISPLAY"]

State = Union[int, float]

# What the result sink shows when there is no value to display.
FAILURE_DISPLAY = "FAILURE (NULL)"


class RunState(str, Enum):  # noqa: D101
    IDLE = "idle"
    VALIDATING = "validating"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ABORTED = "aborted"

    @property
    def terminal(self) -> bool:  # noqa: D401
        return self in (RunState.SUCCEEDED, RunState.FAILED, RunState.ABORTED)


@dataclass(frozen=True, slots=True)
class Outcome:  # noqa: D101
    state: RunState
    value: Optional[State] = None
    run_id: str = ""

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True only for a run that reached ``SUCCEEDED``."""
        return self.state is RunState.SUCCEEDED

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(value: State, run_id: str = "") -> "Outcome":  # noqa: D401
        return Outcome(state=RunState.SUCCEEDED, value=value, run_id=run_id)

    @staticmethod
    def failure(run_id: str = "") -> "Outcome":  # noqa: D401
        return Outcome(state=RunState.FAILED, run_id=run_id)

    @staticmethod
    def aborted(run_id: str = "") -> "Outcome":  # noqa: D401
        return Outcome(state=RunState.ABORTED, run_id=run_id)

    # ------------------------------------------------------------------ #
    def display(self) -> Union[State, str]:  # noqa: D401
        """Value handed to the result sink."""
        return self.value if self.ok else FAILURE_DISPLAY  # type: ignore[return-value]

    def unwrap(self) -> State:  # noqa: D401
        """Return *value* or raise ``ValueError`` for a failed/aborted run."""
        if not self.ok:
            raise ValueError(f"Run {self.run_id or '?'} ended {self.state.value}; no value")
        return self.value  # type: ignore[return-value]
