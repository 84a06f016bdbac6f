from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ScanMode, ScanState


@dataclass
class ScanSession:
    """Mutable scan state. Only the ScanController that owns it may change it."""

    state: ScanState = ScanState.IDLE
    mode: ScanMode = ScanMode.SINGLE
    stop_requested: bool = False
    consecutive_capture_failures: int = 0
    capture_disabled: bool = False
    # Bumped on every capture request; callbacks of older requests are stale.
    capture_generation: int = 0

    @property
    def busy(self) -> bool:
        return self.state == ScanState.RESOLVING

    @property
    def continuous(self) -> bool:
        return self.mode == ScanMode.CONTINUOUS and not self.stop_requested


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy handed out for status reporting."""

    state: ScanState
    mode: ScanMode
    continuous: bool
    busy: bool
    capture_disabled: bool
    consecutive_capture_failures: int

    @classmethod
    def of(cls, session: ScanSession) -> "SessionSnapshot":
        return cls(
            state=session.state,
            mode=session.mode,
            continuous=session.continuous,
            busy=session.busy,
            capture_disabled=session.capture_disabled,
            consecutive_capture_failures=session.consecutive_capture_failures,
        )

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "mode": self.mode.value,
            "continuous": self.continuous,
            "busy": self.busy,
            "capture_disabled": self.capture_disabled,
            "consecutive_capture_failures": self.consecutive_capture_failures,
        }
