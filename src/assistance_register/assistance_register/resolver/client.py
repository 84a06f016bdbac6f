from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests

from ..core.constants import DEFAULT_RESOLVER_TIMEOUT_SECONDS
from .model import Outcome, Resolved, TransportFailure, Unresolved

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, code: str) -> Outcome:
        raise NotImplementedError


def _optional_str(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    return str(value)


def outcome_from_payload(payload: Any) -> Outcome:
    """Map the directory's JSON answer to an outcome.

    Expected keys: correo, fecha_registro, identificacion, nombre, rol (all optional).
    A body without "nombre" means the credential is not known.
    """
    if payload is None:
        return Unresolved()
    if not isinstance(payload, dict):
        return TransportFailure(f"Respuesta inesperada del servidor: {payload!r}")

    name = _optional_str(payload, "nombre")
    if name is None:
        return Unresolved()

    return Resolved(
        name=name,
        email=_optional_str(payload, "correo"),
        registered_at=_optional_str(payload, "fecha_registro"),
        external_id=_optional_str(payload, "identificacion"),
        role=_optional_str(payload, "rol"),
    )


class HttpResolver:
    """Stateless client for the credential directory.

    One POST per call, no retries. Errors come back as TransportFailure.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_RESOLVER_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._url = base_url
        self._timeout = float(timeout)
        self._session = session or requests.Session()

    def resolve(self, code: str) -> Outcome:
        try:
            response = self._session.post(self._url, json={"url": code}, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Resolver call failed for %s: %s", code, e)
            return TransportFailure(str(e))

        if not 200 <= response.status_code < 300:
            logger.warning("Resolver returned HTTP %s for %s", response.status_code, code)
            return TransportFailure(f"Error al procesar la URL: HTTP {response.status_code} {response.text}".strip())

        if not response.content or not response.content.strip():
            return Unresolved()

        try:
            payload = response.json()
        except ValueError as e:
            return TransportFailure(f"Respuesta no es JSON: {e}")

        outcome = outcome_from_payload(payload)
        logger.debug("Resolved %s -> %s", code, type(outcome).__name__)
        return outcome
