"""Inspection protocol rendering."""

from .errors import (
    FinalizeError,
    MeasurementError,
    MissingFieldError,
    ProtocolRenderError,
    ProtocolValidationError,
    SinkError,
)
from .protocol_builder import ProtocolRender, build_protocol_pdf, render_protocol

__all__ = [
    "build_protocol_pdf",
    "render_protocol",
    "ProtocolRender",
    "ProtocolRenderError",
    "ProtocolValidationError",
    "MissingFieldError",
    "MeasurementError",
    "SinkError",
    "FinalizeError",
]
