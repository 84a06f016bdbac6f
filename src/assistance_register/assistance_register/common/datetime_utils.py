from __future__ import annotations

from datetime import datetime

from ..core.constants import TIMESTAMP_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def format_timestamp(value: datetime) -> str:
    """Format as YYYY-MM-DD HH:MM:SS (ledger FechaRegistro column)."""
    return value.strftime(TIMESTAMP_FORMAT)


def export_stamp(value: datetime) -> str:
    """Milliseconds since epoch, used to name exported copies."""
    return str(int(value.timestamp() * 1000))
