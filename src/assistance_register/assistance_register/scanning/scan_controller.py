from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Executor
from typing import Callable, Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_COOLDOWN_SECONDS, DEFAULT_MAX_CAPTURE_FAILURES
from ..core.enums import NoticeKind, ScanMode, ScanState
from ..core.exceptions import CaptureUnavailableError, PersistenceError
from ..ledger.repository import LedgerRepository
from ..resolver.client import Resolver
from ..resolver.model import Outcome, Resolved, TransportFailure, Unresolved
from .capture import CaptureSource
from .events import (
    CaptureCancelled,
    CaptureEnabled,
    CodeCaptured,
    CooldownElapsed,
    ResolveCompleted,
    ScanEvent,
    Shutdown,
    StartRequested,
    StopRequested,
)
from .notifier import Notice, Notifier
from .session import ScanSession, SessionSnapshot

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], None]


def start_timer(delay: float, callback: Callable[[], None]) -> None:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class ScanController:
    """Drives capture -> resolve -> persist cycles.

    Every collaborator talks to the controller by posting an event to its
    mailbox; only the thread processing the mailbox touches the ScanSession.
    While a code is being resolved, further captured codes are dropped, so
    there is never more than one network call or ledger append in flight
    from the scan path.

    Stop requests take effect at the next state boundary: a pending capture
    is withdrawn right away, an in-flight resolve still gets persisted, and a
    running cooldown ends in IDLE instead of a new capture.
    """

    def __init__(
        self,
        session: ScanSession,
        *,
        capture: CaptureSource,
        resolver: Resolver,
        ledger: LedgerRepository,
        notifier: Notifier,
        executor: Executor,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        max_capture_failures: int = DEFAULT_MAX_CAPTURE_FAILURES,
        scheduler: Scheduler = start_timer,
    ):
        self._session = session
        self._capture = capture
        self._resolver = resolver
        self._ledger = ledger
        self._notifier = notifier
        self._executor = executor
        self._cooldown_seconds = float(cooldown_seconds)
        self._max_capture_failures = max(1, int(max_capture_failures))
        self._schedule = scheduler

        self._mailbox: "queue.Queue[ScanEvent]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    # ---- public API (safe from any thread: it only posts) ----

    def post(self, event: ScanEvent) -> None:
        self._mailbox.put(event)

    def start_scan(self, mode: ScanMode = ScanMode.SINGLE) -> None:
        self.post(StartRequested(mode))

    def stop_scan(self) -> None:
        self.post(StopRequested())

    def enable_capture(self) -> None:
        self.post(CaptureEnabled())

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot.of(self._session)

    # ---- mailbox processing ----

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run, name="scan-controller", daemon=True)
        self._thread.start()
        logger.info("Scan controller started")

    def shutdown(self, timeout: float | None = 5.0) -> None:
        if self._thread is None:
            return
        self.post(Shutdown())
        self._thread.join(timeout)
        self._thread = None
        logger.info("Scan controller stopped")

    def drain(self) -> int:
        """Process queued events in the calling thread until the mailbox is empty."""
        processed = 0
        while True:
            try:
                event = self._mailbox.get_nowait()
            except queue.Empty:
                return processed
            if isinstance(event, Shutdown):
                return processed
            self._dispatch(event)
            processed += 1

    def _run(self) -> None:
        while True:
            event = self._mailbox.get()
            if isinstance(event, Shutdown):
                return
            self._dispatch(event)

    def _dispatch(self, event: ScanEvent) -> None:
        handlers = {
            StartRequested: self._on_start,
            StopRequested: self._on_stop,
            CodeCaptured: self._on_code,
            CaptureCancelled: self._on_cancelled,
            ResolveCompleted: self._on_resolved,
            CooldownElapsed: self._on_cooldown_elapsed,
            CaptureEnabled: self._on_capture_enabled,
        }
        handler = handlers.get(type(event))
        if handler is None:
            logger.warning("Unknown scan event %r", event)
            return
        try:
            handler(event)
        except Exception:
            # A broken cycle must not kill the controller thread.
            logger.exception("Error handling %s in state %s", type(event).__name__, self._session.state.value)
            self._go_idle()

    # ---- transitions ----

    def _on_start(self, event: StartRequested) -> None:
        s = self._session
        if s.capture_disabled:
            self._notify(
                NoticeKind.CAPTURE_UNAVAILABLE,
                "El escaneo automático está deshabilitado. Use el registro manual.",
            )
            return
        if s.state != ScanState.IDLE:
            self._notify(NoticeKind.IGNORED, "Ya hay un escaneo en curso")
            return

        s.mode = event.mode
        s.stop_requested = False
        logger.info("Scan started (%s)", event.mode.value)
        self._await_capture()

    def _on_stop(self, event: StopRequested) -> None:
        s = self._session
        if s.state == ScanState.IDLE:
            return
        s.stop_requested = True
        if s.state == ScanState.AWAITING_CAPTURE:
            self._go_idle()
            return
        logger.info("Stop requested; takes effect after %s", s.state.value)

    def _on_code(self, event: CodeCaptured) -> None:
        s = self._session
        if s.state != ScanState.AWAITING_CAPTURE or event.generation != s.capture_generation:
            logger.debug("Dropping code %s captured while %s", event.code, s.state.value)
            return

        s.state = ScanState.RESOLVING
        self._executor.submit(self._resolve_in_background, event.code)

    def _on_cancelled(self, event: CaptureCancelled) -> None:
        s = self._session
        if s.state != ScanState.AWAITING_CAPTURE or event.generation != s.capture_generation:
            logger.debug("Ignoring cancellation of capture request %s", event.generation)
            return
        self._notify(NoticeKind.CANCELLED, "Escaneo cancelado")
        self._go_idle()

    def _on_resolved(self, event: ResolveCompleted) -> None:
        if self._session.state != ScanState.RESOLVING:
            logger.warning("Resolve result for %s arrived while %s", event.code, self._session.state.value)
            return

        self._persist(event.code, event.outcome)

        if self._session.continuous:
            self._session.state = ScanState.COOLDOWN
            self._schedule(self._cooldown_seconds, lambda: self.post(CooldownElapsed()))
        else:
            self._go_idle()

    def _on_cooldown_elapsed(self, event: CooldownElapsed) -> None:
        if self._session.state != ScanState.COOLDOWN:
            return
        if self._session.continuous:
            self._await_capture()
        else:
            self._go_idle()

    def _on_capture_enabled(self, event: CaptureEnabled) -> None:
        self._session.capture_disabled = False
        self._session.consecutive_capture_failures = 0
        logger.info("Automatic capture re-enabled")

    # ---- helpers ----

    def _await_capture(self) -> None:
        s = self._session
        s.state = ScanState.AWAITING_CAPTURE
        s.capture_generation += 1
        generation = s.capture_generation
        try:
            self._capture.request_capture(
                lambda code: self.post(CodeCaptured(code, generation)),
                lambda: self.post(CaptureCancelled(generation)),
            )
        except CaptureUnavailableError as e:
            self._capture_failed(str(e))
        else:
            self._session.consecutive_capture_failures = 0

    def _capture_failed(self, detail: str) -> None:
        s = self._session
        s.consecutive_capture_failures += 1
        if s.consecutive_capture_failures >= self._max_capture_failures:
            s.capture_disabled = True
            message = f"No se pudo iniciar el escáner ({detail}). Escaneo automático deshabilitado."
        else:
            message = f"No se pudo iniciar el escáner: {detail}"
        self._notify(NoticeKind.CAPTURE_UNAVAILABLE, message)
        self._go_idle()

    def _go_idle(self) -> None:
        # An idle controller never leaves a request open at the capture source.
        self._capture.cancel()
        s = self._session
        s.state = ScanState.IDLE
        s.mode = ScanMode.SINGLE
        s.stop_requested = False

    def _resolve_in_background(self, code: str) -> None:
        try:
            outcome = self._resolver.resolve(code)
        except Exception as e:
            logger.exception("Resolver raised for %s", code)
            outcome = TransportFailure(str(e))
        self.post(ResolveCompleted(code, outcome))

    def _persist(self, code: str, outcome: Outcome) -> None:
        if isinstance(outcome, TransportFailure):
            self._notify(NoticeKind.TRANSPORT_ERROR, f"Error: {outcome.detail}")
            return

        if isinstance(outcome, Resolved):
            record = AttendanceRecord.from_resolution(code, outcome)
            kind, message = NoticeKind.ATTENDED, f"Gracias por Asistir {outcome.name}"
        elif isinstance(outcome, Unresolved):
            record = AttendanceRecord.unresolved(code)
            kind, message = NoticeKind.INVALID_CREDENTIAL, "QR de credencial inválida"
        else:
            raise TypeError(f"Unexpected outcome {outcome!r}")

        try:
            self._ledger.append(record)
        except PersistenceError as e:
            self._notify(NoticeKind.PERSISTENCE_ERROR, str(e))
            return
        self._notify(kind, message)

    def _notify(self, kind: NoticeKind, message: str) -> None:
        self._notifier.notify(Notice(kind, message))
