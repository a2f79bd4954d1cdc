"""Event base class, variant registry and construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

from beam.core.errors import ConstructionError, InvalidArgumentError

_IMMUTABLE_FIELDS = frozenset({"name", "emitter"})


@runtime_checkable
class SupportsEmit(Protocol):
    """Anything that can own events: subscribe/unsubscribe + emit/emit_args."""

    def subscribe(self, name: str, callback: Any) -> Any: ...

    def unsubscribe(self, name: str, callback: Any = None) -> None: ...

    def emit(self, name: str, /, event_class: Any = None, **fields: Any) -> Event: ...

    def emit_args(self, name: str, *args: Any) -> None: ...


@dataclass(eq=False)
class Event:
    """One occurrence, handed to every listener of an ``emit`` call.

    ``name`` and ``emitter`` are fixed at construction. The two flags are
    one-way latches: ``stop_default()`` asks the emitter to skip its default
    action, ``stop()`` also halts the remaining listeners.

    Subclass (as a dataclass) to carry payload fields.
    """

    TYPE: ClassVar[str | None] = None

    name: str
    emitter: Any = field(repr=False)
    _default_stopped: bool = field(default=False, init=False, repr=False)
    _stopped: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.name is None:
            raise InvalidArgumentError("Event requires a name", code="missing_name")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError(
                f"Event name must be non-empty text, got {self.name!r}",
                code="invalid_name",
                details={"name": self.name},
            )
        if self.emitter is None:
            raise InvalidArgumentError(
                f"Event {self.name!r} requires an emitter",
                code="missing_emitter",
                details={"name": self.name},
            )
        if not isinstance(self.emitter, SupportsEmit):
            raise InvalidArgumentError(
                f"{type(self.emitter).__name__} is not an emitter",
                code="invalid_emitter",
                details={"name": self.name, "type": type(self.emitter).__name__},
            )

    def __setattr__(self, key: str, value: Any) -> None:
        if key in _IMMUTABLE_FIELDS and key in self.__dict__:
            raise AttributeError(f"cannot assign to field {key!r}")
        object.__setattr__(self, key, value)

    @property
    def is_default_stopped(self) -> bool:
        """True once anyone called stop_default() or stop()."""
        return self._default_stopped

    @property
    def is_stopped(self) -> bool:
        """True once anyone called stop(). Checked by emit after every listener."""
        return self._stopped

    def stop_default(self) -> None:
        """Ask the emitter to skip its default action. Other listeners still run."""
        self._default_stopped = True

    def stop(self) -> None:
        """Halt further listeners for this event. Also stops the default."""
        self.stop_default()
        self._stopped = True


_EVENT_TYPES: dict[str, type[Event]] = {}


def event_type(type_name: str):
    """Decorator to register an Event subclass under a type token."""

    def decorator(cls: Any) -> Any:
        if not (isinstance(cls, type) and issubclass(cls, Event)):
            raise ConstructionError(
                f"{cls!r} is not an Event subclass",
                code="invalid_event_class",
                details={"type_name": type_name},
            )
        existing = _EVENT_TYPES.get(type_name)
        if existing is not None and existing is not cls:
            raise ConstructionError(
                f"Event type {type_name!r} already registered to {existing.__name__}",
                code="duplicate_event_type",
                details={"type_name": type_name, "existing": existing.__name__},
            )
        _EVENT_TYPES[type_name] = cls
        cls.TYPE = type_name
        return cls

    return decorator


event_type("event")(Event)


def registered_event_types() -> dict[str, type[Event]]:
    """Snapshot of the type token -> Event class registry."""
    return dict(_EVENT_TYPES)


def resolve_event_class(event_class: type[Event] | str | None) -> type[Event]:
    """Map a class, registered token or None to an Event class."""
    if event_class is None:
        return Event
    if isinstance(event_class, str):
        try:
            return _EVENT_TYPES[event_class]
        except KeyError:
            raise ConstructionError(
                f"Unknown event type {event_class!r}",
                code="unknown_event_type",
                details={"type_name": event_class},
            ) from None
    if isinstance(event_class, type) and issubclass(event_class, Event):
        return event_class
    raise ConstructionError(
        f"{event_class!r} is not an Event subclass",
        code="invalid_event_class",
    )


def build_event(
    event_class: type[Event] | str | None,
    name: str,
    emitter: Any,
    /,
    **fields: Any,
) -> Event:
    """Construct an event variant; field mismatches become ConstructionError.

    Payload fields named ``name`` or ``emitter`` clash with the fixed fields
    and are reported the same way.

    InvalidArgumentError (bad name/emitter) is raised unchanged.
    """
    cls = resolve_event_class(event_class)
    try:
        return cls(name=name, emitter=emitter, **fields)
    except InvalidArgumentError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConstructionError(
            f"Cannot construct {cls.__name__} for event {name!r}: {exc}",
            code="event_construction_failed",
            details={"event_class": cls.__name__, "fields": sorted(fields)},
            original_error=exc,
        ) from exc
