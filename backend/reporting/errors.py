"""Exceptions raised while rendering inspection protocols."""
from __future__ import annotations


class ProtocolRenderError(Exception):
    """Base class for every failure of a protocol render."""


class ProtocolValidationError(ProtocolRenderError, ValueError):
    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Invalid inspection: {field}")


class MissingFieldError(ProtocolValidationError):
    """A required field is absent or blank. Raised before anything is drawn."""

    def __init__(self, field: str):
        if field == "inspection":
            message = "Invalid inspection: inspection object is missing"
        else:
            message = f"Invalid inspection: missing required {field}"
        super().__init__(field, message)


class MeasurementError(ProtocolRenderError):
    """The text measurer failed."""


class SinkError(ProtocolRenderError):
    """The drawing surface rejected an operation."""


class FinalizeError(ProtocolRenderError):
    """Producing the document bytes failed after layout completed."""
