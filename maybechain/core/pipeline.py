from __future__ import annotations

"""The three-step pipeline.

1. ``call_executor``  – gate: reject small states, otherwise add *increment*.
2. ``update_state``   – integrity: reject odd (or fractional) states, halve.
3. ``return_event``   – multiply by *multiplier*; never fails.

Each function is pure apart from the narration it sends to *report*.
"""

from functools import partial
from typing import List

from maybechain.config import DEFAULT_CONFIG, PipelineConfig
from maybechain.core.chain import Chain
from maybechain.core.maybe import Maybe, absent, unit
from maybechain.core.result import State
from maybechain.core.step import Step
from maybechain.sinks import ProgressSink

__all__ = [
    "call_executor",
    "update_state",
    "return_event",
    "default_steps",
    "build_chain",
]


def call_executor(
    data: State,
    report: ProgressSink,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> Maybe[State]:
    report(f"Step 1 (CALL Executor): Input State is {data}. Checking for valid command...", False)

    if data <= config.gate_threshold:
        report(
            f"Step 1 FAILURE: State value <= {config.gate_threshold}. Execution stopped!",
            True,
        )
        return absent()

    next_value = data + config.increment
    report(f"Step 1 SUCCESS: Command accepted. Next State: {next_value}", False)
    return unit(next_value)


def update_state(data: State, report: ProgressSink) -> Maybe[State]:
    report(f"Step 2 (UPDATE/PERSIST): Input State is {data}. Checking state integrity...", False)

    # Fractional states fail the parity check; whole floats are halved to an int.
    if isinstance(data, float):
        if not data.is_integer():
            report(f"Step 2 FAILURE: State {data} is not a whole number. Integrity Error!", True)
            return absent()
        data = int(data)

    if data % 2 != 0:
        report("Step 2 FAILURE: State is Odd. Integrity Error!", True)
        return absent()

    next_value = data // 2
    report(f"Step 2 SUCCESS: State updated and persisted. Next State: {next_value}", False)
    return unit(next_value)


def return_event(
    data: State,
    report: ProgressSink,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> Maybe[State]:
    report(f"Step 3 (RETURN EVENT): Final successful step. Input is {data}.", False)

    final_value = data * config.multiplier
    report(f"Step 3 SUCCESS: Final Event data is computed: {final_value}", False)
    return unit(final_value)


# --------------------------------------------------------------------------- #
# Assembly
# --------------------------------------------------------------------------- #

def default_steps(config: PipelineConfig | None = None) -> List[Step]:  # noqa: D401
    """Return the three pipeline steps bound to *config*."""
    cfg = config or DEFAULT_CONFIG
    return [
        Step(
            partial(call_executor, config=cfg),
            id="call_executor",
            name="Call Executor",
            description=f"fail if state <= {cfg.gate_threshold}, else add {cfg.increment}",
        ),
        Step(
            update_state,
            name="Update State",
            description="fail if state is odd or fractional, else halve",
        ),
        Step(
            partial(return_event, config=cfg),
            id="return_event",
            name="Return Event",
            description=f"multiply by {cfg.multiplier}",
        ),
    ]


def build_chain(config: PipelineConfig | None = None) -> Chain:  # noqa: D401
    return Chain(name="Maybe Pipeline", steps=default_steps(config), emoji="⛓️")
