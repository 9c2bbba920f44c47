"""
Exceptions raised by the conversion and HBL generation services.

API routes translate these into HTTP responses; services never raise
HTTPException themselves.
"""

from typing import Any


class ConversionError(Exception):
    """Base exception for MBL conversion and HBL generation errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ExtractionFailure(ConversionError):
    """The extraction service could not be reached, refused, or returned garbage."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, {"status_code": status_code} if status_code is not None else None)
        self.status_code = status_code


class NotFound(ConversionError):
    """A lookup by business key matched nothing."""


class ChainResolutionFailure(NotFound):
    """No booking references the given MBL number."""

    def __init__(self, mbl_number: str) -> None:
        super().__init__(f"Booking not found for MBL {mbl_number}", {"mbl_number": mbl_number})
        self.mbl_number = mbl_number
