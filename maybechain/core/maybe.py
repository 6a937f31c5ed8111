from __future__ import annotations
"""Maybe container: a value that is either *present* or *absent*.

Steps return a :class:`Maybe` and are glued together with :meth:`Maybe.chain`
(or the ``>>`` operator).  Once any step hands back :data:`ABSENT`, every
later step is skipped and the absence travels unchanged to the end.

Example
-------
```python
from maybechain.core.maybe import unit, absent

def halve(x):
    return unit(x // 2) if x % 2 == 0 else absent()

unit(40) >> halve >> halve   # Present(value=10)
unit(41) >> halve >> halve   # ABSENT, second halve never called
```
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Maybe", "Present", "Absent", "ABSENT", "unit", "absent", "compose"]


class Maybe(Generic[T]):  # noqa: D101 – abstract two-variant container
    __slots__ = ()

    # Constructors ------------------------------------------------------ #
    @staticmethod
    def unit(value: T) -> "Maybe[T]":  # noqa: D401
        """Lift *value* into the container. Any value counts as present."""
        return Present(value)

    @staticmethod
    def absent() -> "Maybe[Any]":  # noqa: D401
        return ABSENT

    # ------------------------------------------------------------------ #
    @property
    def is_present(self) -> bool:  # noqa: D401
        return isinstance(self, Present)

    @property
    def is_absent(self) -> bool:  # noqa: D401
        return not self.is_present

    def chain(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Feed the wrapped value to *fn*; skip *fn* entirely when absent."""
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":  # noqa: D401
        """Apply a plain function to a present value."""
        return self.chain(lambda v: Present(fn(v)))

    def extract(self) -> T | "Absent":
        """Return the wrapped value, or :data:`ABSENT` when there is none."""
        raise NotImplementedError

    def value_or(self, default: T) -> T:  # noqa: D401
        return self.extract() if self.is_present else default  # type: ignore[return-value]

    def __rshift__(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.chain(fn)


@dataclass(frozen=True, slots=True)
class Present(Maybe[T]):  # noqa: D101
    value: T

    def chain(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        result = fn(self.value)
        if not isinstance(result, Maybe):
            name = getattr(fn, "__name__", repr(fn))
            raise TypeError(
                f"Chained function '{name}' must return a Maybe, got {type(result).__name__}"
            )
        return result

    def extract(self) -> T:
        return self.value


class Absent(Maybe[Any]):
    """The single "no value" marker. Chaining on it is a no-op."""

    __slots__ = ()
    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def chain(self, fn: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        return self  # type: ignore[return-value]

    def extract(self) -> "Absent":
        return self

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


ABSENT = Absent()


# --------------------------------------------------------------------------- #
# Function-style helpers
# --------------------------------------------------------------------------- #

def unit(value: T) -> Maybe[T]:  # noqa: D401
    """Return ``Present(value)``."""
    return Present(value)


def absent() -> Maybe[Any]:  # noqa: D401
    """Return the shared :data:`ABSENT` marker."""
    return ABSENT


def compose(
    f: Callable[[T], Maybe[U]],
    g: Callable[[U], Maybe[Any]],
) -> Callable[[T], Maybe[Any]]:
    """Return ``x -> f(x).chain(g)``, i.e. run *f* then *g* as one step."""

    def _composed(x: T) -> Maybe[Any]:
        return f(x).chain(g)

    _composed.__name__ = (
        f"{getattr(f, '__name__', 'f')}_then_{getattr(g, '__name__', 'g')}"
    )
    return _composed
