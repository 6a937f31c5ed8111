from __future__ import annotations
"""Seed parsing: raw user input -> numeric chain state.

Text must be a base-10 integer (surrounding whitespace and a sign are
fine).  Numbers passed programmatically may be ``int`` or a finite
``float``.  Anything else raises ``ValueError`` before a chain is built.
"""
import math
import re
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, ValidationError, field_validator

from maybechain.core.result import State

__all__ = ["Seed", "parse_seed"]

_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


class Seed(BaseModel):  # noqa: D101
    model_config = ConfigDict(frozen=True)

    value: Union[StrictInt, StrictFloat]

    @field_validator("value")
    @classmethod
    def _finite(cls, v: State) -> State:
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("seed must be a finite number")
        return v


def parse_seed(raw: Any) -> State:  # noqa: D401
    """Return the numeric seed held by *raw*.

    Raises ValueError on any malformed input.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid seed {raw!r}: booleans are not numbers")

    if isinstance(raw, str):
        text = raw.strip()
        if not _INT_PATTERN.match(text):
            raise ValueError(f"Invalid seed {raw!r}: expected a base-10 integer")
        candidate: Any = int(text)
    elif isinstance(raw, (int, float)):
        candidate = raw
    else:
        raise ValueError(f"Invalid seed {raw!r}: unsupported type {type(raw).__name__}")

    try:
        return Seed(value=candidate).value
    except ValidationError as exc:
        raise ValueError(f"Invalid seed {raw!r}: {exc.errors()[0]['msg']}") from exc
