"""Door: reference consumer that opens unless a listener vetoes it."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from beam.emitter import Emitter
from beam.events import Event, event_type


@event_type("door_knock")
@dataclass(eq=False)
class DoorKnock(Event):
    """Someone knocked on the door."""

    who: str


class Door(Emitter):
    """A door that emits before_open/open and before_close/close."""

    def __init__(self, *, is_open: bool = False) -> None:
        self.is_open = is_open

    def open(self) -> bool:
        """Open the door unless a before_open listener stops the default."""
        if self.is_open:
            return True
        before = self.emit("before_open")
        if before.is_default_stopped:
            logger.info("Door stayed closed: before_open was stopped")
            return False
        self.is_open = True
        self.emit("open")
        return True

    def close(self) -> bool:
        """Close the door unless a before_close listener stops the default."""
        if not self.is_open:
            return True
        before = self.emit("before_close")
        if before.is_default_stopped:
            logger.info("Door stayed open: before_close was stopped")
            return False
        self.is_open = False
        self.emit("close")
        return True

    def knock(self, who: str) -> DoorKnock:
        """Emit a knock event carrying who."""
        return self.emit("knock", event_class=DoorKnock, who=who)  # type: ignore[return-value]
