"""Tagged result of a controller call."""

from __future__ import annotations

from enum import StrEnum

from pytram.models._base import TramBaseModel
from pytram.models.state import TramState
from pytram.state.events import TramEvent


class ResultStatus(StrEnum):
    OK = "ok"
    ERROR = "error"


class TransitionResult(TramBaseModel):
    """Outcome of dispatching one event.

    ``state`` is the snapshot after the call. For an ``error`` result it
    is the unchanged snapshot the event was rejected against.
    """

    status: ResultStatus
    message: str
    event: TramEvent
    state: TramState

    @classmethod
    def success(cls, event: TramEvent, message: str, state: TramState) -> TransitionResult:
        return cls(status=ResultStatus.OK, message=message, event=event, state=state)

    @classmethod
    def failure(cls, event: TramEvent, message: str, state: TramState) -> TransitionResult:
        return cls(status=ResultStatus.ERROR, message=message, event=event, state=state)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    def as_tuple(self) -> tuple[ResultStatus, str]:
        """``(status, message)`` pair, e.g. ``("ok", "Doors opened")``."""
        return self.status, self.message
