import textwrap

import pytest

from maybechain import ConfigError, PipelineConfig, load_config
from maybechain.config import DEFAULT_CONFIG


def test_defaults():
    assert DEFAULT_CONFIG == PipelineConfig(gate_threshold=20, increment=10, multiplier=3)
    assert DEFAULT_CONFIG.to_dict() == {"gate_threshold": 20, "increment": 10, "multiplier": 3}


def test_load_config(tmp_path):
    f = tmp_path / "cfg.yml"
    f.write_text(textwrap.dedent(
        """
        gate_threshold: 50
        multiplier: 4
        """
    ))
    cfg = load_config(f)
    assert cfg == PipelineConfig(gate_threshold=50, increment=10, multiplier=4)


def test_empty_file_keeps_defaults(tmp_path):
    f = tmp_path / "empty.yml"
    f.write_text("")
    assert load_config(f) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "body",
    [
        "gate_threshold: high\n",
        "divisor: 3\n",
        "- 1\n- 2\n",
        "increment: true\n",
    ],
)
def test_invalid_config(tmp_path, body):
    f = tmp_path / "bad.yml"
    f.write_text(body)
    with pytest.raises(ConfigError):
        load_config(f)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yml")


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("body", ["gate_threshold: .nan\n", "increment: .inf\n", "multiplier: -.inf\n"])
def test_non_finite_values_rejected(tmp_path, body):
    f = tmp_path / "nan.yml"
    f.write_text(body)
    with pytest.raises(ConfigError, match="finite"):
        load_config(f)
