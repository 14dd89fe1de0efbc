from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    # fromisoformat alone also takes compact and week forms on newer Pythons.
    if not _ISO_DATE.fullmatch(value):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def now_local() -> datetime:
    """Current server-local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
