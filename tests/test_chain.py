import pytest

from maybechain import (
    ABSENT,
    FAILURE_DISPLAY,
    Chain,
    ListSink,
    RunState,
    Step,
    absent,
    build_chain,
    default_steps,
    run_chain,
    step,
    unit,
)
from maybechain.core.result import Outcome


class SpyStep(Step):
    """Step that records every state it is called with."""

    def __init__(self, inner: Step):
        super().__init__(inner.fn, id=inner.id, name=inner.name)
        self.calls = []

    def execute(self, data, sink, *, run_id=""):
        self.calls.append(data)
        return super().execute(data, sink, run_id=run_id)


def spied_chain():
    spies = [SpyStep(s) for s in default_steps()]
    return Chain(name="spied", steps=spies), spies


def _run(raw, chain=None):
    sink = ListSink()
    outcome = run_chain(raw, sink, sink.publish_result, chain=chain)
    return outcome, sink


def test_end_to_end_success():
    chain, (s1, s2, s3) = spied_chain()
    outcome, sink = _run("100", chain)
    assert outcome.state is RunState.SUCCEEDED and outcome.ok
    assert outcome.value == 165
    assert sink.results == [165]
    assert (s1.calls, s2.calls, s3.calls) == ([100], [110], [55])
    assert "Chain Complete! Final Value: 165" in sink.texts[-1]
    assert not sink.failures


def test_gate_failure_skips_remaining_steps():
    chain, (s1, s2, s3) = spied_chain()
    outcome, sink = _run("15", chain)
    assert outcome.state is RunState.FAILED and not outcome.ok
    assert sink.results == [FAILURE_DISPLAY]
    assert s1.calls == [15]
    assert s2.calls == [] and s3.calls == []
    assert not any("Step 2" in t or "Step 3" in t for t in sink.texts)
    assert sink.messages[-1].failed and "Chain Halted" in sink.messages[-1].text


def test_integrity_failure_skips_step3():
    chain, (s1, s2, s3) = spied_chain()
    outcome, sink = _run("21", chain)
    assert outcome.state is RunState.FAILED
    assert s2.calls == [31]
    assert s3.calls == []
    assert sink.results == [FAILURE_DISPLAY]


def test_malformed_input_aborts_before_chain():
    chain, spies = spied_chain()
    outcome, sink = _run("abc", chain)
    assert outcome.state is RunState.ABORTED
    assert sink.results == [FAILURE_DISPLAY]
    assert sink.texts == ["Please enter a valid number."]
    assert sink.messages[0].failed
    assert all(s.calls == [] for s in spies)


def test_messages_in_production_order():
    _, sink = _run("100")
    assert sink.texts[0].startswith("--- Starting Chain with Initial Value: 100")
    order = [t.split(" ")[1] for t in sink.texts[1:-1]]
    assert order == ["1", "1", "2", "2", "3", "3"]


def test_result_sink_called_once_per_run():
    sink = ListSink()
    for raw in ("100", "15", "abc"):
        run_chain(raw, sink, sink.publish_result)
    assert sink.results == [165, FAILURE_DISPLAY, FAILURE_DISPLAY]


def test_zero_result_is_success():
    @step
    def to_zero(x, report):
        return unit(0)

    outcome, sink = _run("5", Chain(name="zero", steps=[to_zero]))
    assert outcome.ok
    assert sink.results == [0]
    assert outcome.display() == 0


def test_numeric_seed_accepted():
    outcome, _ = _run(100)
    assert outcome.value == 165


def test_chain_run_returns_container():
    final = build_chain().run(21, ListSink())
    assert final.extract() is ABSENT
    assert build_chain().run(100, ListSink()).extract() == 165


def test_empty_chain_rejected():
    with pytest.raises(ValueError):
        Chain(name="empty", steps=[])


def test_step_must_return_maybe():
    bad = Step(lambda x, report: x + 1, id="bad")
    with pytest.raises(TypeError, match="bad"):
        Chain(name="bad", steps=[bad]).run(1, ListSink())


def test_step_decorator_defaults():
    @step(id="gate")
    def reject_all(x, report):
        """Always fail."""
        return absent()

    assert reject_all.id == "gate"
    assert reject_all.description == "Always fail."
    assert step(reject_all.fn).id == "reject_all"


def test_outcome_unwrap():
    assert Outcome.success(3).unwrap() == 3
    with pytest.raises(ValueError):
        Outcome.failure("r1").unwrap()
    assert RunState.ABORTED.terminal and not RunState.RUNNING.terminal
