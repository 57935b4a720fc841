"""Tram state snapshot."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import model_validator

from pytram.models._base import StopId, TramBaseModel


class TramMode(StrEnum):
    """Coarse operational phase of the tram."""

    IN_DEPOT = "in_depot"
    AT_STOP = "at_stop"
    MOVING = "moving"


class TramState(TramBaseModel):
    """Complete state of one tram.

    ``doors_open`` and ``driver_present`` are flags layered on top of
    ``mode``; they are not states of their own but gate transitions.
    The safety invariants are checked on every construction, so an
    instance that exists is always a valid state.
    """

    mode: TramMode = TramMode.IN_DEPOT
    doors_open: bool = False
    driver_present: bool = False
    current_stop: StopId | None = None

    @classmethod
    def initial(cls) -> TramState:
        """State of a freshly started tram: parked in the depot, empty."""
        return cls()

    @model_validator(mode="after")
    def _check_invariants(self) -> TramState:
        if self.doors_open and self.mode != TramMode.AT_STOP:
            raise ValueError("doors may only be open while at a stop")
        if self.mode == TramMode.MOVING and (self.doors_open or not self.driver_present):
            raise ValueError("a moving tram needs closed doors and a driver")
        if (self.current_stop is not None) != (self.mode == TramMode.AT_STOP):
            raise ValueError("current_stop is set if and only if the tram is at a stop")
        return self

    def evolve(self, **changes: Any) -> TramState:
        """Return a validated copy with *changes* applied."""
        # model_copy(update=...) skips validation; rebuild instead.
        return type(self).model_validate({**self.model_dump(), **changes})
