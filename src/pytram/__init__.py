"""pytram - guarded state machine for a tram's depot, motion, doors and driver."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytram")
except PackageNotFoundError:
    __version__ = "0+local"
from pytram.config import TramConfig
from pytram.controller import AsyncTramController, TramController
from pytram.exceptions import (
    GuardViolation,
    TramAlreadyExistsError,
    TramConfigError,
    TramError,
    TramNotFoundError,
    TramRegistryError,
)
from pytram.models import ResultStatus, StopId, TramMode, TramState, TransitionResult
from pytram.registry import TramRegistry
from pytram.state.events import TramCommand, TramEvent

__all__ = [
    "__version__",
    "AsyncTramController",
    "GuardViolation",
    "ResultStatus",
    "StopId",
    "TramAlreadyExistsError",
    "TramCommand",
    "TramConfig",
    "TramConfigError",
    "TramController",
    "TramError",
    "TramEvent",
    "TramMode",
    "TramNotFoundError",
    "TramRegistry",
    "TramRegistryError",
    "TramState",
    "TransitionResult",
]
