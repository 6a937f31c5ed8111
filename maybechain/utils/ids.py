from __future__ import annotations

"""maybechain.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Identifier helpers.

:func:`snake_case` turns function and event class names into step ids and
JSON event names (``ChainStarted`` -> ``chain_started``); :func:`new_run_id`
tags every run so its events can be told apart.
"""

import re
import uuid
from datetime import datetime

__all__ = ["snake_case", "new_run_id"]

# Word boundaries inside CamelCase: "ChainStarted", "HTTPError", "step1Gate".
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


def snake_case(text: str) -> str:  # noqa: D401
    """Return *text* converted to ``snake_case``.

    CamelCase humps and runs of non-alphanumeric characters both become a
    single ``_``; the result is lower-cased with no leading/trailing ``_``.
    """
    s = _CAMEL_BOUNDARY.sub("_", text)
    s = _SEPARATORS.sub("_", s)
    return s.strip("_").lower()


def new_run_id() -> str:
    """Return ``YYYYMMDD-HHMMSS-xxxxxxxx`` (timestamp + 8 hex chars)."""
    return f"{datetime.now():%Y%m%d-%H%M%S}-{uuid.uuid4().hex[:8]}"
