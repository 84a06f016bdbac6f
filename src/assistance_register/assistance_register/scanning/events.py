"""Messages delivered to the ScanController mailbox.

Capture callbacks, resolver workers and the cooldown timer only post these;
the controller thread is the one that acts on them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import ScanMode
from ..resolver.model import Outcome


@dataclass(frozen=True)
class StartRequested:
    mode: ScanMode


@dataclass(frozen=True)
class StopRequested:
    pass


@dataclass(frozen=True)
class CodeCaptured:
    code: str
    generation: int


@dataclass(frozen=True)
class CaptureCancelled:
    generation: int


@dataclass(frozen=True)
class ResolveCompleted:
    code: str
    outcome: Outcome


@dataclass(frozen=True)
class CooldownElapsed:
    pass


@dataclass(frozen=True)
class CaptureEnabled:
    pass


@dataclass(frozen=True)
class Shutdown:
    pass


ScanEvent = Union[
    StartRequested,
    StopRequested,
    CodeCaptured,
    CaptureCancelled,
    ResolveCompleted,
    CooldownElapsed,
    CaptureEnabled,
    Shutdown,
]
