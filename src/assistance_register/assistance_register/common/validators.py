from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return value.strip()


def require_choice(value: str, field_name: str, choices: Iterable[str]) -> str:
    options = tuple(choices)
    if value not in options:
        raise ValidationError(f"{field_name} debe ser uno de: {', '.join(options)}")
    return value


def require_no_delimiter(value: str, field_name: str, delimiter: str = ",") -> str:
    # The ledger has no field escaping.
    if delimiter in value:
        raise ValidationError(f"{field_name} no puede contener '{delimiter}'")
    return value
