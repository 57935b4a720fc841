"""Guard predicates, one per event.

Guards only look at the current state. Anything not explicitly allowed
here is rejected by the machine.
"""

from __future__ import annotations

from collections.abc import Callable

from pytram.models.state import TramMode, TramState
from pytram.state.events import TramEvent

Guard = Callable[[TramState], bool]


def _always(_state: TramState) -> bool:
    return True


def _in_depot(state: TramState) -> bool:
    return state.mode == TramMode.IN_DEPOT


def _moving(state: TramState) -> bool:
    return state.mode == TramMode.MOVING


def _can_depart_from(mode: TramMode) -> Guard:
    def guard(state: TramState) -> bool:
        return state.mode == mode and not state.doors_open and state.driver_present

    return guard


def _at_stop_with_doors(*, open_: bool) -> Guard:
    def guard(state: TramState) -> bool:
        return state.mode == TramMode.AT_STOP and state.doors_open is open_

    return guard


_GUARDS: dict[TramEvent, Guard] = {
    TramEvent.ADD_DRIVER: _always,
    TramEvent.REMOVE_DRIVER: _in_depot,
    TramEvent.LEAVE_DEPOT: _can_depart_from(TramMode.IN_DEPOT),
    TramEvent.ARRIVE_AT_STOP: _moving,
    TramEvent.OPEN_DOORS: _at_stop_with_doors(open_=False),
    TramEvent.CLOSE_DOORS: _at_stop_with_doors(open_=True),
    TramEvent.START_MOVING: _can_depart_from(TramMode.AT_STOP),
    TramEvent.RETURN_TO_DEPOT: _moving,
}


def guard_for(event: TramEvent) -> Guard:
    return _GUARDS[event]


def is_allowed(state: TramState, event: TramEvent) -> bool:
    """Return ``True`` when *event* may be applied to *state*."""
    return guard_for(event)(state)
