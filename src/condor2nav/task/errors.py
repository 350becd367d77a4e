"""Exceptions that abort a task translation."""

from __future__ import annotations


class TranslationError(ValueError):
    """Base class: the task cannot be represented in the target format."""


class CapacityExceeded(TranslationError):
    """Raised when the task has more turnpoints than the target stores."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"Too many waypoints ({count}) in a task file (only {limit} supported)"
        )
        self.count = count
        self.limit = limit


class UnsupportedSectorShape(TranslationError):
    """Raised for a sector-shape code the translator does not know."""

    def __init__(self, code: int, waypoint_name: str) -> None:
        super().__init__(
            f"Unsupported sector type '{code}' specified for TP '{waypoint_name}'"
        )
        self.code = code
        self.waypoint_name = waypoint_name
