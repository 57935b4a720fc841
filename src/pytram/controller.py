"""Tram controllers: one owned state, serialized event handling."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Any

from pytram.config import TramConfig
from pytram.exceptions import GuardViolation
from pytram.models._base import StopId
from pytram.models.result import TransitionResult
from pytram.models.state import TramState
from pytram.state.events import TramCommand, TramEvent
from pytram.state.machine import allowed_events, apply_command

_logger = logging.getLogger(__name__)

TransitionCallback = Callable[[TransitionResult], None]


class _ControllerCore:
    """State ownership and result building shared by both controllers.

    Subclasses are responsible for holding their lock around
    :meth:`_transition`.
    """

    def __init__(
        self,
        config: TramConfig | None = None,
        *,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._config = config or TramConfig()
        self._state = TramState.initial()
        self._on_transition = on_transition

    @property
    def config(self) -> TramConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def state(self) -> TramState:
        """Read-only snapshot of the current state."""
        return self._state

    def allowed_events(self) -> list[TramEvent]:
        """Events that would succeed against the current state."""
        return allowed_events(self._state)

    def _transition(self, command: TramCommand) -> TransitionResult:
        before = self._state
        try:
            after, message = apply_command(before, command)
        except GuardViolation as exc:
            _logger.debug("%s: rejected %s: %s", self.name, command.event.value, exc)
            if self._config.trace_enabled:
                _logger.debug("%s: state unchanged %s", self.name, before.model_dump())
            return TransitionResult.failure(command.event, str(exc), before)

        self._state = after
        _logger.debug("%s: %s", self.name, message)
        if self._config.trace_enabled:
            _logger.debug(
                "%s: %s %s -> %s",
                self.name,
                command.event.value,
                before.model_dump(),
                after.model_dump(),
            )
        return TransitionResult.success(command.event, message, after)

    def _notify(self, result: TransitionResult) -> None:
        if not result.ok or self._on_transition is None:
            return
        try:
            self._on_transition(result)
        except Exception:  # noqa: BLE001
            _logger.exception("%s: on_transition callback failed", self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, state={self._state!r})"


class TramController(_ControllerCore):
    """Owner of one tram's state.

    Every event is checked and applied under a per-instance lock, so
    concurrent callers observe the transitions one at a time. Guard
    failures come back as ``error`` results and never change the state.

    Usage::

        tram = TramController()
        tram.add_driver()
        result = tram.leave_depot()
        assert result.ok
    """

    def __init__(
        self,
        config: TramConfig | None = None,
        *,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        super().__init__(config, on_transition=on_transition)
        self._lock = threading.Lock()

    def dispatch(self, command: TramCommand) -> TransitionResult:
        """Apply one command and return its tagged result."""
        with self._lock:
            result = self._transition(command)
        self._notify(result)
        return result

    def _send(self, event: TramEvent, **kwargs: Any) -> TransitionResult:
        return self.dispatch(TramCommand(event=event, **kwargs))

    def add_driver(self) -> TransitionResult:
        return self._send(TramEvent.ADD_DRIVER)

    def remove_driver(self) -> TransitionResult:
        """Remove the driver; only allowed in the depot."""
        return self._send(TramEvent.REMOVE_DRIVER)

    def leave_depot(self) -> TransitionResult:
        """Depart from the depot; needs a driver and closed doors."""
        return self._send(TramEvent.LEAVE_DEPOT)

    def arrive_at_stop(self, stop: StopId) -> TransitionResult:
        return self._send(TramEvent.ARRIVE_AT_STOP, stop=stop)

    def open_doors(self) -> TransitionResult:
        return self._send(TramEvent.OPEN_DOORS)

    def close_doors(self) -> TransitionResult:
        return self._send(TramEvent.CLOSE_DOORS)

    def start_moving(self) -> TransitionResult:
        """Depart from the current stop; needs a driver and closed doors."""
        return self._send(TramEvent.START_MOVING)

    def return_to_depot(self) -> TransitionResult:
        return self._send(TramEvent.RETURN_TO_DEPOT)


class AsyncTramController(_ControllerCore):
    """Coroutine flavour of :class:`TramController`.

    Events are serialized with an ``asyncio.Lock``; use one instance per
    event loop.
    """

    def __init__(
        self,
        config: TramConfig | None = None,
        *,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        super().__init__(config, on_transition=on_transition)
        self._lock = asyncio.Lock()

    async def dispatch(self, command: TramCommand) -> TransitionResult:
        async with self._lock:
            result = self._transition(command)
        self._notify(result)
        return result

    async def _send(self, event: TramEvent, **kwargs: Any) -> TransitionResult:
        return await self.dispatch(TramCommand(event=event, **kwargs))

    async def add_driver(self) -> TransitionResult:
        return await self._send(TramEvent.ADD_DRIVER)

    async def remove_driver(self) -> TransitionResult:
        return await self._send(TramEvent.REMOVE_DRIVER)

    async def leave_depot(self) -> TransitionResult:
        return await self._send(TramEvent.LEAVE_DEPOT)

    async def arrive_at_stop(self, stop: StopId) -> TransitionResult:
        return await self._send(TramEvent.ARRIVE_AT_STOP, stop=stop)

    async def open_doors(self) -> TransitionResult:
        return await self._send(TramEvent.OPEN_DOORS)

    async def close_doors(self) -> TransitionResult:
        return await self._send(TramEvent.CLOSE_DOORS)

    async def start_moving(self) -> TransitionResult:
        return await self._send(TramEvent.START_MOVING)

    async def return_to_depot(self) -> TransitionResult:
        return await self._send(TramEvent.RETURN_TO_DEPOT)
