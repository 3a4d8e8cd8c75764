"""Formatting for protocol fields. Dates follow the Swedish ISO style (YYYY-MM-DD)."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any


def safe_string(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%d/%m/%Y", "%m/%d/%Y"):
        try:
            return datetime.strptime(text[:10], fmt).date()
        except ValueError:
            continue
    return None


def format_swedish_date(value: Any) -> str:
    """Render as YYYY-MM-DD; unparseable text is shown as given, missing as blank."""
    if value is None:
        return ""
    parsed = _parse_date(value)
    if parsed is None:
        return str(value).strip()
    return parsed.strftime("%Y-%m-%d")


def format_swedish_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_number(value: Any) -> str:
    """Whole numbers without decimals, others with at most two."""
    if value is None or value == "":
        return ""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}".rstrip("0").rstrip(".")


def format_cost(value: float) -> str:
    if not value or value <= 0:
        return "0"
    return format_number(value)


def yes_no(flag: bool, yes: str = "Ja", no: str = "Nej") -> str:
    return yes if flag else no
