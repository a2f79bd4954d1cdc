"""Beam domain exceptions."""

from __future__ import annotations


class BeamError(Exception):
    """Base for beam domain errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class InvalidArgumentError(BeamError, ValueError):
    """Event or listener built from missing or malformed arguments."""


class ConstructionError(BeamError, TypeError):
    """Requested event variant could not be built from the supplied fields."""


class BeamConfigurationError(BeamError):
    """Config validation or load failure."""
