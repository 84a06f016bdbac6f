from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import ResetOutcome


class LedgerRepository(Protocol):
    def append(self, record: AttendanceRecord) -> None:
        """Durably append one record. Raises PersistenceError on I/O failure."""

        raise NotImplementedError

    def reset(self) -> ResetOutcome:
        raise NotImplementedError

    def export_copy(self, destination: Path) -> Path:
        """Copy the ledger elsewhere without touching the source. Returns the written path."""

        raise NotImplementedError

    def read_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def exists(self) -> bool:
        raise NotImplementedError
