from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def require_all_non_empty(*values: Optional[str], message: str) -> None:
    """Fail with a single message when any of the values is empty or whitespace-only."""
    if any(is_blank(v) for v in values):
        raise ValidationError(message)
