"""Emitter mixin: per-instance listener registry and synchronous dispatch."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from loguru import logger

from beam.config import cfg
from beam.core.errors import InvalidArgumentError
from beam.events import Event, build_event

Listener = Callable[..., Any]


def _describe(callback: Listener) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def _same_listener(registered: Listener, callback: Listener) -> bool:
    """Identity match; bound methods match on the same instance and function."""
    if registered is callback:
        return True
    return (
        inspect.ismethod(registered)
        and inspect.ismethod(callback)
        and registered.__self__ is callback.__self__
        and registered.__func__ is callback.__func__
    )


class Emitter:
    """Gives any host class ``subscribe``/``unsubscribe``/``emit``/``emit_args``.

    Mix into a host class, or instantiate and keep as an attribute. No
    ``__init__`` call is required; the registry is created per instance on
    first use.

    Listeners for a name run in registration order on the calling thread.
    Each dispatch iterates over a snapshot of the sequence, so listeners
    added or removed mid-dispatch only affect later calls. Exceptions raised
    by listeners propagate to the caller and end the dispatch.
    """

    @property
    def _listeners(self) -> dict[str, list[Listener]]:
        try:
            return self.__dict__["_beam_listeners"]
        except KeyError:
            registry: dict[str, list[Listener]] = {}
            self.__dict__["_beam_listeners"] = registry
            return registry

    def subscribe(self, name: str, callback: Listener) -> Listener:
        """Append callback to the listeners for name. Returns the callback."""
        if not callable(callback):
            raise InvalidArgumentError(
                f"Listener for {name!r} must be callable, got {type(callback).__name__}",
                code="invalid_listener",
                details={"name": name},
            )
        self._listeners.setdefault(name, []).append(callback)
        logger.debug("Subscribed {} to {!r} on {}", _describe(callback), name, type(self).__name__)
        return callback

    on = subscribe

    def listen(self, name: str) -> Callable[[Listener], Listener]:
        """Decorator form of subscribe."""

        def decorator(callback: Listener) -> Listener:
            return self.subscribe(name, callback)

        return decorator

    def unsubscribe(self, name: str, callback: Listener | None = None) -> None:
        """Remove every registration of callback for name, or all listeners for name."""
        registry = self._listeners
        if name not in registry:
            return
        if callback is None:
            removed = len(registry.pop(name))
        else:
            remaining = [cb for cb in registry[name] if not _same_listener(cb, callback)]
            removed = len(registry[name]) - len(remaining)
            if remaining:
                registry[name] = remaining
            else:
                del registry[name]
        logger.debug("Unsubscribed {} listener(s) from {!r}", removed, name)

    un = unsubscribe

    def listeners(self, name: str) -> list[Listener]:
        """Copy of the listeners currently registered for name."""
        return list(self._listeners.get(name, ()))

    def has_listeners(self, name: str) -> bool:
        return bool(self._listeners.get(name))

    def emit(
        self,
        name: str,
        /,
        event_class: type[Event] | str | None = None,
        **fields: Any,
    ) -> Event:
        """Build an event and hand it to each listener until one stops it.

        event_class is an Event subclass or a registered type token; extra
        keyword arguments become its fields. Returns the event so the caller
        can check ``is_default_stopped``.
        """
        evt = build_event(event_class, name, self, **fields)
        snapshot = self.listeners(name)
        trace = cfg.trace_dispatch
        for index, callback in enumerate(snapshot):
            if trace:
                logger.debug("Dispatching {!r} to {}", name, _describe(callback))
            callback(evt)
            if evt.is_stopped:
                logger.debug(
                    "Event {!r} stopped by {}; skipped {} listener(s)",
                    name,
                    _describe(callback),
                    len(snapshot) - index - 1,
                )
                break
        return evt

    def emit_args(self, name: str, *args: Any) -> None:
        """Call each listener for name with the raw positional args."""
        trace = cfg.trace_dispatch
        for callback in self.listeners(name):
            if trace:
                logger.debug("Dispatching {!r} args to {}", name, _describe(callback))
            callback(*args)
