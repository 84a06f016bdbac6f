from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Resolved:
    """The directory recognized the credential."""

    name: str
    email: Optional[str] = None
    registered_at: Optional[str] = None
    external_id: Optional[str] = None
    role: Optional[str] = None


@dataclass(frozen=True)
class Unresolved:
    """Call succeeded but no identity came back (invalid or unregistered credential)."""


@dataclass(frozen=True)
class TransportFailure:
    """Network error, timeout or non-2xx answer. Reported, never persisted."""

    detail: str


Outcome = Union[Resolved, Unresolved, TransportFailure]
