"""maybechain: short-circuiting step chains on a Maybe container.

Main components:
* `Maybe` / `unit` / `absent`: the present-or-absent container and its `chain`
* `Step` / `step`: wrap a ``(state, sink) -> Maybe`` function as a chain node
* `Chain`: ordered steps threaded through `Maybe.chain`
* `run_chain`: parse a seed, run the pipeline, report to the sinks
"""

# Version info
__version__ = "0.1.0"

# Core components
from maybechain.core.maybe import Maybe, Present, Absent, ABSENT, unit, absent, compose
from maybechain.core.step import Step, step
from maybechain.core.chain import Chain
from maybechain.core.result import Outcome, RunState, FAILURE_DISPLAY
from maybechain.core.pipeline import call_executor, update_state, return_event, default_steps, build_chain
from maybechain.core.runner import run_chain

# Sinks and config
from maybechain.sinks import ProgressMessage, ListSink, RichSink
from maybechain.config import PipelineConfig, ConfigError, load_config

__all__ = [
    # Container
    "Maybe",
    "Present",
    "Absent",
    "ABSENT",
    "unit",
    "absent",
    "compose",

    # Chain
    "Step",
    "step",
    "Chain",
    "Outcome",
    "RunState",
    "FAILURE_DISPLAY",
    "call_executor",
    "update_state",
    "return_event",
    "default_steps",
    "build_chain",
    "run_chain",

    # Sinks / config
    "ProgressMessage",
    "ListSink",
    "RichSink",
    "PipelineConfig",
    "ConfigError",
    "load_config",
]
