from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.constants import (
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_MAX_CAPTURE_FAILURES,
    DEFAULT_RESOLVER_TIMEOUT_SECONDS,
    DEFAULT_ROLES,
)
from .ledger.csv_ledger import CsvLedger
from .manual.service import ManualEntryService
from .resolver.client import HttpResolver, Resolver
from .scanning.capture import QueuedCaptureSource
from .scanning.notifier import NoticeBoard
from .scanning.scan_controller import ScanController, Scheduler, start_timer
from .scanning.session import ScanSession


@dataclass(frozen=True)
class Container:
    ledger: CsvLedger
    export_dir: Path
    resolver: Resolver
    capture: QueuedCaptureSource
    notices: NoticeBoard
    session: ScanSession
    executor: Executor

    scan_controller: ScanController
    manual_service: ManualEntryService


def build_container(
    *,
    app_config: dict,
    resolver: Optional[Resolver] = None,
    executor: Optional[Executor] = None,
    scheduler: Scheduler = start_timer,
) -> Container:
    ledger = CsvLedger(Path(app_config["LEDGER_PATH"]))
    export_dir = Path(app_config["EXPORT_DIR"])

    if resolver is None:
        resolver = HttpResolver(
            str(app_config["RESOLVER_URL"]),
            timeout=float(app_config.get("RESOLVER_TIMEOUT_SECONDS", DEFAULT_RESOLVER_TIMEOUT_SECONDS)),
        )
    if executor is None:
        executor = ThreadPoolExecutor(
            max_workers=int(app_config.get("RESOLVER_WORKERS", 2)),
            thread_name_prefix="resolver",
        )

    capture = QueuedCaptureSource()
    notices = NoticeBoard()
    session = ScanSession()

    scan_controller = ScanController(
        session,
        capture=capture,
        resolver=resolver,
        ledger=ledger,
        notifier=notices,
        executor=executor,
        cooldown_seconds=float(app_config.get("SCAN_COOLDOWN_SECONDS", DEFAULT_COOLDOWN_SECONDS)),
        max_capture_failures=int(app_config.get("MAX_CAPTURE_FAILURES", DEFAULT_MAX_CAPTURE_FAILURES)),
        scheduler=scheduler,
    )
    manual_service = ManualEntryService(ledger, roles=app_config.get("ROLES") or DEFAULT_ROLES)

    return Container(
        ledger=ledger,
        export_dir=export_dir,
        resolver=resolver,
        capture=capture,
        notices=notices,
        session=session,
        executor=executor,
        scan_controller=scan_controller,
        manual_service=manual_service,
    )
