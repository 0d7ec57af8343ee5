"""Validate form drafts and enforce required fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from inventory_client.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(draft: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Return required fields that are absent or blank, in declaration order."""
    return [field for field in required if is_blank(draft.get(field))]


def require_fields(draft: Mapping[str, Any], required: Iterable[str]) -> None:
    """Ensure a draft has every required field before anything is sent."""
    missing = missing_fields(draft, required)
    if missing:
        raise ValidationError(missing)


def blank_to_none(value: Any) -> Any:
    """Clean optional text inputs: an empty box means the field is unset."""
    return None if is_blank(value) else value
