"""Pure transition function.

``apply_command`` never mutates its input: states are immutable, so a
rejected event cannot leave a partially updated state behind.
"""

from __future__ import annotations

from pytram.exceptions import GuardViolation
from pytram.models.state import TramMode, TramState
from pytram.state.events import TramCommand, TramEvent
from pytram.state.guards import is_allowed


def apply_command(state: TramState, command: TramCommand) -> tuple[TramState, str]:
    """Apply *command* to *state*.

    Returns
    -------
    tuple[TramState, str]
        The new state and the success message.

    Raises
    ------
    GuardViolation
        If the event's guard does not hold for *state*.
    """
    event = command.event
    if not is_allowed(state, event):
        raise GuardViolation(event, state)

    if event == TramEvent.ADD_DRIVER:
        return state.evolve(driver_present=True), "Driver added"
    if event == TramEvent.REMOVE_DRIVER:
        return state.evolve(driver_present=False), "Driver removed"
    if event == TramEvent.LEAVE_DEPOT:
        return state.evolve(mode=TramMode.MOVING), "Tram left the depot"
    if event == TramEvent.ARRIVE_AT_STOP:
        new_state = state.evolve(mode=TramMode.AT_STOP, current_stop=command.stop)
        return new_state, f"Tram arrived at stop {command.stop}"
    if event == TramEvent.OPEN_DOORS:
        return state.evolve(doors_open=True), "Doors opened"
    if event == TramEvent.CLOSE_DOORS:
        return state.evolve(doors_open=False), "Doors closed"
    if event == TramEvent.START_MOVING:
        # current_stop only exists while stopped.
        return state.evolve(mode=TramMode.MOVING, current_stop=None), "Tram started moving"
    if event == TramEvent.RETURN_TO_DEPOT:
        return state.evolve(mode=TramMode.IN_DEPOT, current_stop=None), "Tram returned to depot"
    raise GuardViolation(event, state)


def allowed_events(state: TramState) -> list[TramEvent]:
    """Events whose guard currently holds, in declaration order."""
    return [event for event in TramEvent if is_allowed(state, event)]
