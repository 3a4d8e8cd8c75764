"""Pre-flight checks run before any page is drawn."""
from __future__ import annotations

from typing import Any

from .errors import MissingFieldError

REQUIRED_FIELDS = ("id", "date", "address")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_protocol(model: Any) -> None:
    """
    Reject a model that cannot produce a protocol.

    Fields are checked in a fixed order and the first failure is raised;
    errors are not aggregated.
    """
    if model is None:
        raise MissingFieldError("inspection")
    for field in REQUIRED_FIELDS:
        if _is_blank(getattr(model, field, None)):
            raise MissingFieldError(field)
