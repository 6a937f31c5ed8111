"""maybechain utilities."""

from .ids import snake_case, new_run_id
from .parsing import parse_seed

__all__ = [
    "snake_case",
    "new_run_id",
    "parse_seed",
]
