from __future__ import annotations
"""Run one chain from raw input to reported outcome.

``IDLE -> VALIDATING -> ABORTED``                      (malformed seed)
``IDLE -> VALIDATING -> RUNNING -> SUCCEEDED | FAILED``

The runner only looks at whether the final container holds a value; which
step failed is already visible in the progress lines that step emitted.
"""
from typing import Any

from maybechain.config import PipelineConfig
from maybechain.core.chain import Chain
from maybechain.core.maybe import ABSENT
from maybechain.core.pipeline import build_chain
from maybechain.core.result import Outcome, RunState
from maybechain.sinks import ProgressSink, ResultSink
from maybechain.utils.events import publish, InputRejected, ChainStarted, ChainFinished
from maybechain.utils.ids import new_run_id
from maybechain.utils.logging import log
from maybechain.utils.parsing import parse_seed

__all__ = ["run_chain"]

INVALID_INPUT_MESSAGE = "Please enter a valid number."


def _transition(run_id: str, state: RunState) -> RunState:
    log.debug("run %s: %s", run_id, state.value)
    return state


def run_chain(
    raw: Any,
    progress: ProgressSink,
    result: ResultSink,
    *,
    chain: Chain | None = None,
    config: PipelineConfig | None = None,
) -> Outcome:
    """Parse *raw*, run the pipeline and report to *progress* / *result*.

    *chain* overrides the default three-step pipeline; *config* is only used
    to build that default.
    """
    run_id = new_run_id()
    _transition(run_id, RunState.IDLE)

    # ---- Validate input before any container exists -------------------- #
    _transition(run_id, RunState.VALIDATING)
    try:
        initial = parse_seed(raw)
    except ValueError as exc:
        state = _transition(run_id, RunState.ABORTED)
        publish(InputRejected(run_id=run_id, raw=raw, reason=str(exc)))
        progress(INVALID_INPUT_MESSAGE, True)
        outcome = Outcome.aborted(run_id)
        result(outcome.display())
        publish(ChainFinished(run_id=run_id, state=state.value, display=outcome.display()))
        return outcome

    if chain is None:
        chain = build_chain(config)

    # ---- Run ------------------------------------------------------------ #
    _transition(run_id, RunState.RUNNING)
    progress(f"--- Starting Chain with Initial Value: {initial} ---", False)
    publish(ChainStarted(run_id=run_id, chain_name=chain.name, initial=initial))

    final = chain.run(initial, progress, run_id=run_id)
    value = final.extract()

    # ---- Report --------------------------------------------------------- #
    if value is ABSENT:
        state = _transition(run_id, RunState.FAILED)
        progress(
            "Chain Halted! Final Value: NULL. (A step failed and stopped the entire process).",
            True,
        )
        outcome = Outcome.failure(run_id)
    else:
        state = _transition(run_id, RunState.SUCCEEDED)
        progress(f"Chain Complete! Final Value: {value}", False)
        outcome = Outcome.success(value, run_id)

    result(outcome.display())
    publish(ChainFinished(run_id=run_id, state=state.value, display=outcome.display()))
    return outcome
