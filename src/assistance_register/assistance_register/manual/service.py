from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Tuple

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_timestamp, now_local
from ..common.validators import require_choice, require_no_delimiter, require_non_empty
from ..core.constants import DEFAULT_ROLES
from ..core.exceptions import ValidationError
from ..ledger.repository import LedgerRepository
from .model import ManualEntryForm

logger = logging.getLogger(__name__)


class ManualEntryService:
    """Writes a locally entered attendance straight to the ledger (no resolver call)."""

    def __init__(
        self,
        ledger: LedgerRepository,
        *,
        roles: Iterable[str] = DEFAULT_ROLES,
        clock: Callable[[], datetime] = now_local,
    ):
        self._ledger = ledger
        self._roles: Tuple[str, ...] = tuple(roles)
        self._clock = clock
        if not self._roles:
            raise ValueError("at least one role must be configured")

    @property
    def roles(self) -> Tuple[str, ...]:
        return self._roles

    def submit(self, form: ManualEntryForm) -> AttendanceRecord:
        """Validate, append and clear the form.

        Raises ValidationError (nothing written, form untouched) or
        PersistenceError (form untouched so the attendee can retry).
        """
        try:
            external_id = require_non_empty(form.identification, "Cédula")
            name = require_non_empty(form.full_name, "Nombre Completo")
            email = require_non_empty(form.email, "Correo Electrónico")
            role = require_non_empty(form.role, "Rol")
        except ValidationError:
            raise ValidationError("Por favor, llene todos los campos") from None

        require_choice(role, "Rol", self._roles)
        for value, label in (
            (external_id, "Cédula"),
            (name, "Nombre Completo"),
            (email, "Correo Electrónico"),
        ):
            require_no_delimiter(value, label)

        record = AttendanceRecord.manual(
            email=email,
            registered_at=format_timestamp(self._clock()),
            external_id=external_id,
            name=name,
            role=role,
        )
        self._ledger.append(record)
        logger.info("Manual attendance saved for %s", name)

        form.clear()
        return record

    def cancel(self, form: ManualEntryForm) -> None:
        form.clear()
