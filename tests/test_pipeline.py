import pytest

from maybechain import ABSENT, ListSink, PipelineConfig, call_executor, default_steps, return_event, update_state


def test_step1_boundary_fails_at_threshold():
    sink = ListSink()
    assert call_executor(20, sink) is ABSENT
    assert sink.messages[-1].failed
    assert "Step 1 FAILURE" in sink.messages[-1].text


def test_step1_boundary_succeeds_above_threshold():
    sink = ListSink()
    assert call_executor(21, sink).extract() == 31
    assert not any(m.failed for m in sink.messages)
    assert "Next State: 31" in sink.texts[-1]


def test_step2_odd_fails():
    sink = ListSink()
    assert update_state(31, sink) is ABSENT
    assert sink.failures and "Odd" in sink.failures[0].text


def test_step2_even_halves():
    sink = ListSink()
    result = update_state(30, sink).extract()
    assert result == 15
    assert isinstance(result, int)


def test_step2_whole_float_is_halved_to_int():
    result = update_state(30.0, ListSink()).extract()
    assert result == 15 and isinstance(result, int)


@pytest.mark.parametrize("value", [30.5, 2.25, -0.5])
def test_step2_rejects_fractional_state(value):
    sink = ListSink()
    assert update_state(value, sink) is ABSENT
    assert "not a whole number" in sink.failures[0].text


def test_step3_never_fails():
    sink = ListSink()
    assert return_event(15, sink).extract() == 45
    for value in (-7, 0, 2.5, 10**12):
        assert return_event(value, ListSink()).extract() == value * 3
    assert not sink.failures


def test_each_step_narrates_input_first():
    for fn, value in ((call_executor, 21), (update_state, 30), (return_event, 15)):
        sink = ListSink()
        fn(value, sink)
        assert "Input" in sink.texts[0] and str(value) in sink.texts[0]


def test_custom_config_changes_constants():
    cfg = PipelineConfig(gate_threshold=50, increment=2, multiplier=4)
    s1, s2, s3 = default_steps(cfg)
    sink = ListSink()
    assert s1.execute(50, sink) is ABSENT
    assert s1.execute(52, sink).extract() == 54
    assert s2.execute(54, sink).extract() == 27
    assert s3.execute(27, sink).extract() == 108


def test_default_steps_ids():
    assert [s.id for s in default_steps()] == ["call_executor", "update_state", "return_event"]
    assert default_steps()[1].name == "Update State"
