from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** for chain lifecycle events.

Example
-------
```python
from maybechain.utils.events import subscribe, publish, StepFinished

@subscribe(StepFinished)
def _on_step(evt: StepFinished):
    print(f"{evt.step_id} ok={evt.ok}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

__all__ = [
    "Event",
    "InputRejected",
    "ChainStarted",
    "StepStarted",
    "StepFinished",
    "ChainFinished",
    "ALL_EVENTS",
    "subscribe",
    "unsubscribe",
    "publish",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class InputRejected(Event):
    run_id: str
    raw: Any
    reason: str


@dataclass(slots=True)
class ChainStarted(Event):
    run_id: str
    chain_name: str
    initial: Any


@dataclass(slots=True)
class StepStarted(Event):
    run_id: str
    step_id: str
    data: Any


@dataclass(slots=True)
class StepFinished(Event):
    run_id: str
    step_id: str
    ok: bool
    value: Optional[Any] = None


@dataclass(slots=True)
class ChainFinished(Event):
    run_id: str
    state: str
    display: Any


ALL_EVENTS = (InputRejected, ChainStarted, StepStarted, StepFinished, ChainFinished)


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:  # noqa: D401
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A broken handler must never break the run that emitted the event.
            from maybechain.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)
