import re

import pytest

from maybechain.utils.ids import new_run_id, snake_case


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ChainStarted", "chain_started"),
        ("StepFinished", "step_finished"),
        ("InputRejected", "input_rejected"),
        ("HTTPError", "http_error"),
        ("update_state", "update_state"),
        ("Call Executor!", "call_executor"),
        ("__private__name", "private_name"),
        ("step1Gate", "step1_gate"),
    ],
)
def test_snake_case(text, expected):
    assert snake_case(text) == expected


def test_new_run_id_format():
    rid = new_run_id()
    assert re.fullmatch(r"\d{8}-\d{6}-[0-9a-f]{8}", rid)
    assert new_run_id() != rid
