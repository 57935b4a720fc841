"""Custom exception hierarchy for pytram."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pytram.models.state import TramState
    from pytram.state.events import TramEvent


class TramError(Exception):
    """Base exception for all pytram errors."""


class TramConfigError(TramError):
    """Invalid or missing configuration."""


class GuardViolation(TramError):
    """An event's precondition does not hold for the current state.

    Guard violations are local and recoverable: the state the event was
    evaluated against is left untouched, and the caller may retry once the
    precondition is satisfied (e.g. add a driver before leaving the depot).
    """

    def __init__(self, event: TramEvent, state: TramState) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Invalid action {event.value} for current state {state.mode.value}")


class TramRegistryError(TramError):
    """Registry lookup or registration failure."""

    def __init__(self, message: str, *, name: str = "") -> None:
        self.name = name
        super().__init__(message)


class TramNotFoundError(TramRegistryError):
    """No controller is registered under the requested name."""


class TramAlreadyExistsError(TramRegistryError):
    """A controller is already registered under the requested name."""
