from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

from ..core.exceptions import CaptureUnavailableError

logger = logging.getLogger(__name__)

OnCode = Callable[[str], None]
OnCancel = Callable[[], None]


class CaptureSource(Protocol):
    def request_capture(self, on_code: OnCode, on_cancel: OnCancel) -> None:
        """Ask for one code. Exactly one callback fires later, from any thread.

        Raises CaptureUnavailableError if the capability cannot be started.
        """

        raise NotImplementedError

    def cancel(self) -> None:
        """Withdraw the outstanding request without firing a callback."""

        raise NotImplementedError


class QueuedCaptureSource:
    """Capture source fed from outside (HTTP handlers, a scanner client).

    Holds at most one outstanding request. A code that arrives while nothing
    is waiting is refused, which is how a busy scan cycle pushes back.
    """

    def __init__(self, *, available: bool = True):
        self._lock = threading.Lock()
        self._pending: Optional[tuple[OnCode, OnCancel]] = None
        self._available = available
        self._unavailable_reason = "Cámara no disponible"

    def set_available(self, available: bool, reason: str | None = None) -> None:
        with self._lock:
            self._available = available
            if reason:
                self._unavailable_reason = reason

    @property
    def waiting(self) -> bool:
        with self._lock:
            return self._pending is not None

    def request_capture(self, on_code: OnCode, on_cancel: OnCancel) -> None:
        with self._lock:
            if not self._available:
                raise CaptureUnavailableError(self._unavailable_reason)
            if self._pending is not None:
                logger.warning("Replacing an outstanding capture request")
            self._pending = (on_code, on_cancel)

    def cancel(self) -> None:
        with self._lock:
            self._pending = None

    def submit_code(self, code: str) -> bool:
        code = (code or "").strip()
        if not code:
            return False
        with self._lock:
            pending, self._pending = self._pending, None
        if pending is None:
            logger.debug("No capture outstanding; dropping code %s", code)
            return False
        pending[0](code)
        return True

    def user_cancel(self) -> bool:
        with self._lock:
            pending, self._pending = self._pending, None
        if pending is None:
            return False
        pending[1]()
        return True

