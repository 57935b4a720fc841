"""Value types returned by pytram controllers."""

from pytram.models._base import StopId, TramBaseModel
from pytram.models.result import ResultStatus, TransitionResult
from pytram.models.state import TramMode, TramState

__all__ = [
    "ResultStatus",
    "StopId",
    "TramBaseModel",
    "TramMode",
    "TramState",
    "TransitionResult",
]
