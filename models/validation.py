"""Input parsing for forms and CLI arguments."""

from datetime import datetime
from typing import Any, Optional

from dateutil.parser import isoparse


def require_text(value: Optional[str], label: str) -> str:
    """Return stripped text, or raise ValueError if blank."""
    text = (value or "").strip()
    if not text:
        raise ValueError(f"{label} is required")
    return text


def optional_text(value: Optional[str]) -> Optional[str]:
    """Return stripped text, or None if blank."""
    text = (value or "").strip()
    return text or None


def parse_amount(value: Any, label: str, blank: Optional[float] = 0.0) -> Optional[float]:
    """
    Parse a non-negative amount.

    Blank input returns `blank` (zero by default, matching the entry forms).
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return blank
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number")
    if result != result:  # NaN
        raise ValueError(f"{label} must be a number")
    if result < 0:
        raise ValueError(f"{label} must be non-negative")
    return result


def parse_date(value: Optional[str], label: str = "Date") -> str:
    """Parse an ISO-8601 date (YYYY-MM-DD) and return it normalized."""
    text = require_text(value, label)
    try:
        parsed: datetime = isoparse(text)
    except ValueError:
        raise ValueError(f"{label} must be a date in YYYY-MM-DD format")
    return parsed.date().isoformat()
