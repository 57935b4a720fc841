"""Events accepted by the transition engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import model_validator

from pytram.models._base import StopId, TramBaseModel


class TramEvent(StrEnum):
    ADD_DRIVER = "add_driver"
    REMOVE_DRIVER = "remove_driver"
    LEAVE_DEPOT = "leave_depot"
    ARRIVE_AT_STOP = "arrive_at_stop"
    OPEN_DOORS = "open_doors"
    CLOSE_DOORS = "close_doors"
    START_MOVING = "start_moving"
    RETURN_TO_DEPOT = "return_to_depot"


class TramCommand(TramBaseModel):
    """A request to apply one event; only arrivals carry a stop."""

    event: TramEvent
    stop: StopId | None = None

    @model_validator(mode="after")
    def _check_stop(self) -> TramCommand:
        if self.event == TramEvent.ARRIVE_AT_STOP:
            if self.stop is None:
                raise ValueError("arrive_at_stop requires a stop")
        elif self.stop is not None:
            raise ValueError(f"{self.event.value} does not take a stop")
        return self
