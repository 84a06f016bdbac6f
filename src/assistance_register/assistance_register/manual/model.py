from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError


@dataclass
class ManualEntryForm:
    """Fields typed in by the attendee when no credential can be scanned."""

    identification: str = ""
    full_name: str = ""
    email: str = ""
    role: str = ""

    def clear(self) -> None:
        self.identification = ""
        self.full_name = ""
        self.email = ""
        self.role = ""

    @classmethod
    def from_payload(cls, data: object) -> "ManualEntryForm":
        if not isinstance(data, dict):
            raise ValidationError("El cuerpo de la solicitud debe ser un objeto JSON")
        return cls(
            identification=str(data.get("identificacion") or ""),
            full_name=str(data.get("nombre") or ""),
            email=str(data.get("correo") or ""),
            role=str(data.get("rol") or ""),
        )
