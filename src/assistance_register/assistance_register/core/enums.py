from __future__ import annotations

from enum import Enum


class ScanState(str, Enum):
    """Scan cycle state: capture -> resolve -> persist."""

    IDLE = "IDLE"
    AWAITING_CAPTURE = "AWAITING_CAPTURE"
    RESOLVING = "RESOLVING"
    COOLDOWN = "COOLDOWN"


class ScanMode(str, Enum):
    SINGLE = "single"
    CONTINUOUS = "continuous"


class NoticeKind(str, Enum):
    """User-facing feedback categories (toast/speech on the scanning device)."""

    ATTENDED = "ATTENDED"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    CANCELLED = "CANCELLED"
    CAPTURE_UNAVAILABLE = "CAPTURE_UNAVAILABLE"
    IGNORED = "IGNORED"


class ResetOutcome(str, Enum):
    DELETED = "DELETED"
    NOTHING_TO_RESET = "NOTHING_TO_RESET"
