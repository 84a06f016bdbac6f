from __future__ import annotations

import logging
import os
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, List

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import export_stamp, now_local
from ..core.constants import EXPORT_PREFIX, LEDGER_HEADER
from ..core.enums import ResetOutcome
from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

_HEADER_LINE = ",".join(LEDGER_HEADER)


class CsvLedger:
    """Append-only attendance ledger backed by a single CSV file.

    All operations hold one lock, so the scan path and the manual path can
    share an instance without interleaving lines or racing the header check.
    Fields are written as-is (no quoting); a comma inside a field shifts the
    columns of that row, and read_records skips such rows with a warning.
    """

    def __init__(self, path: Path | str, *, clock: Callable[[], datetime] = now_local):
        self._path = Path(path)
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def append(self, record: AttendanceRecord) -> None:
        line = record.to_line()
        if line.count(",") != len(LEDGER_HEADER) - 1:
            logger.warning("Record from %s contains a comma; row columns will shift", record.source)

        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                is_new = not self._path.exists()
                with self._path.open("a", encoding="utf-8", newline="") as fh:
                    if is_new:
                        fh.write(_HEADER_LINE + "\n")
                    fh.write(line + "\n")
                    fh.flush()
                    os.fsync(fh.fileno())
            except OSError as e:
                logger.error("Could not append to ledger %s: %s", self._path, e)
                raise PersistenceError(f"No se pudo guardar el registro: {e}") from e

        logger.debug("Appended row for %s to %s", record.source, self._path)

    def reset(self) -> ResetOutcome:
        with self._lock:
            if not self._path.exists():
                return ResetOutcome.NOTHING_TO_RESET
            try:
                self._path.unlink()
            except OSError as e:
                logger.error("Could not delete ledger %s: %s", self._path, e)
                raise PersistenceError(f"Error al resetear el archivo: {e}") from e

        logger.info("Ledger %s reset", self._path)
        return ResetOutcome.DELETED

    def export_copy(self, destination: Path | str) -> Path:
        destination = Path(destination)
        with self._lock:
            if not self._path.exists():
                raise PersistenceError("No hay archivo para descargar")

            # A path without a suffix is a directory, created on demand.
            if destination.is_dir() or not destination.suffix:
                target = destination / f"{EXPORT_PREFIX}_{export_stamp(self._clock())}.csv"
            else:
                target = destination
            target = _free_name(target)

            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                # "x" mode refuses to clobber a file created since _free_name looked.
                with self._path.open("rb") as src, target.open("xb") as dst:
                    shutil.copyfileobj(src, dst)
            except OSError as e:
                logger.error("Could not export ledger to %s: %s", target, e)
                raise PersistenceError(f"Error al guardar archivo: {e}") from e

        logger.info("Ledger exported to %s", target)
        return target

    def read_records(self) -> List[AttendanceRecord]:
        with self._lock:
            if not self._path.exists():
                return []
            try:
                with self._path.open("r", encoding="utf-8", newline="") as fh:
                    lines = fh.read().splitlines()
            except OSError as e:
                raise PersistenceError(f"No se pudo leer el archivo: {e}") from e

        records: List[AttendanceRecord] = []
        for lineno, line in enumerate(lines[1:], start=2):
            if not line:
                continue
            try:
                records.append(AttendanceRecord.from_row(line.split(",")))
            except ValueError as e:
                logger.warning("Skipping row %d of %s: %s", lineno, self._path.name, e)
        return records


def _free_name(target: Path) -> Path:
    if not target.exists():
        return target
    n = 1
    while True:
        candidate = target.with_name(f"{target.stem}_{n}{target.suffix}")
        if not candidate.exists():
            return candidate
        n += 1
