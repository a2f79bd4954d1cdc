"""Beam: events with stop/stop-default semantics and an Emitter mixin."""

from loguru import logger

from beam.core.errors import (
    BeamConfigurationError,
    BeamError,
    ConstructionError,
    InvalidArgumentError,
)
from beam.emitter import Emitter, Listener
from beam.events import (
    Event,
    SupportsEmit,
    build_event,
    event_type,
    registered_event_types,
    resolve_event_class,
)

__version__ = "0.3.0"

# Library default: silent until the application enables it.
logger.disable("beam")

__all__ = [
    "BeamConfigurationError",
    "BeamError",
    "ConstructionError",
    "Emitter",
    "Event",
    "InvalidArgumentError",
    "Listener",
    "SupportsEmit",
    "__version__",
    "build_event",
    "event_type",
    "registered_event_types",
    "resolve_event_class",
]
