from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Protocol

from ..common.datetime_utils import format_timestamp, now_local
from ..core.constants import DEFAULT_NOTICE_LIMIT
from ..core.enums import NoticeKind

logger = logging.getLogger(__name__)

_ERROR_KINDS = {
    NoticeKind.TRANSPORT_ERROR,
    NoticeKind.PERSISTENCE_ERROR,
    NoticeKind.CAPTURE_UNAVAILABLE,
}


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    message: str
    created_at: datetime = field(default_factory=now_local)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "created_at": format_timestamp(self.created_at),
        }


class Notifier(Protocol):
    def notify(self, notice: Notice) -> None:
        raise NotImplementedError


class NoticeBoard:
    """Keeps the latest notices for clients to poll and logs each one."""

    def __init__(self, *, limit: int = DEFAULT_NOTICE_LIMIT):
        self._notices: deque[Notice] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def notify(self, notice: Notice) -> None:
        level = logging.WARNING if notice.kind in _ERROR_KINDS else logging.INFO
        logger.log(level, "[%s] %s", notice.kind.value, notice.message)
        with self._lock:
            self._notices.append(notice)

    def recent(self, limit: int | None = None) -> List[Notice]:
        with self._lock:
            items = list(self._notices)
        if limit is not None:
            items = items[-limit:] if limit > 0 else []
        return items
