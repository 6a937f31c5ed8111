from __future__ import annotations

"""Pipeline constants and their YAML loader.

Example YAML:

```yaml
gate_threshold: 20   # step 1 fails for values <= this
increment: 10        # step 1 adds this
multiplier: 3        # step 3 multiplies by this
```

Every key is optional; missing keys keep their defaults.
"""

import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

import yaml
from jsonschema import ValidationError, validate as _js_validate

from maybechain.core.result import State

__all__ = ["PipelineConfig", "ConfigError", "DEFAULT_CONFIG", "load_config"]


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


@dataclass(frozen=True)
class PipelineConfig:  # noqa: D101 – self-documenting via fields
    gate_threshold: State = 20
    increment: State = 10
    multiplier: State = 3

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return asdict(self)


DEFAULT_CONFIG = PipelineConfig()


def load_config(path: str | Path) -> PipelineConfig:  # noqa: D401
    """Load and validate the YAML file at *path*."""
    try:
        data = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        _js_validate(instance=data, schema=_SCHEMA)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config '{path}': {exc.message}") from exc

    # JSON-schema "number" lets YAML .nan/.inf through.
    for key, value in data.items():
        if not math.isfinite(value):
            raise ConfigError(f"Invalid config '{path}': {key} must be a finite number, got {value}")

    return PipelineConfig(**data)


# --------------------------------------------------------------------------- #
# Minimal JSON Schema for config files
# --------------------------------------------------------------------------- #

_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "gate_threshold": {"type": "number"},
        "increment": {"type": "number"},
        "multiplier": {"type": "number"},
    },
}
