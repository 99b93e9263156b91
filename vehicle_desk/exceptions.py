"""Exception types raised by Vehicle Desk components."""

from __future__ import annotations


class VehicleDeskError(Exception):
    """Base class for all Vehicle Desk errors."""


class VehicleServiceError(VehicleDeskError):
    """Raised when vehicle records cannot be retrieved from a source."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UnknownFormatError(VehicleDeskError, ValueError):
    """Raised when an export format name has no registered encoder."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown export format: {name!r} (available: {', '.join(available)})")


__all__ = ["UnknownFormatError", "VehicleDeskError", "VehicleServiceError"]
