from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_present(value: Any, message: str) -> str:
    """Reject None/empty values without trimming or case-folding them."""
    if not isinstance(value, str) or value == "":
        raise ValidationError(message)
    return value
