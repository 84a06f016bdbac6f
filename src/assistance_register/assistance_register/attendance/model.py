from __future__ import annotations

from dataclasses import asdict, astuple, dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ..core.constants import LEDGER_COLUMNS, MANUAL_SOURCE, NULL_SENTINEL

if TYPE_CHECKING:
    from ..resolver.model import Resolved


def _or_null(value: Optional[str]) -> str:
    return NULL_SENTINEL if value is None else value


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row of the ledger.

    Column order is fixed: source, email, registered_at, external_id, name, role.
    Missing values are the literal string "null", never None.
    """

    source: str
    email: str
    registered_at: str
    external_id: str
    name: str
    role: str

    def to_row(self) -> tuple[str, ...]:
        return astuple(self)

    def to_line(self) -> str:
        return ",".join(self.to_row())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_row(cls, fields: Sequence[str]) -> "AttendanceRecord":
        if len(fields) != LEDGER_COLUMNS:
            raise ValueError(f"expected {LEDGER_COLUMNS} fields, got {len(fields)}")
        return cls(*fields)

    @classmethod
    def from_resolution(cls, code: str, resolved: "Resolved") -> "AttendanceRecord":
        return cls(
            source=code,
            email=_or_null(resolved.email),
            registered_at=_or_null(resolved.registered_at),
            external_id=_or_null(resolved.external_id),
            name=_or_null(resolved.name),
            role=_or_null(resolved.role),
        )

    @classmethod
    def unresolved(cls, code: str) -> "AttendanceRecord":
        """Row for a credential that was scanned but is unknown to the directory."""
        return cls(code, NULL_SENTINEL, NULL_SENTINEL, NULL_SENTINEL, NULL_SENTINEL, NULL_SENTINEL)

    @classmethod
    def manual(
        cls,
        *,
        email: str,
        registered_at: str,
        external_id: str,
        name: str,
        role: str,
    ) -> "AttendanceRecord":
        return cls(
            source=MANUAL_SOURCE,
            email=email,
            registered_at=registered_at,
            external_id=external_id,
            name=name,
            role=role,
        )
