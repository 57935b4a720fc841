"""Named controller instances.

Lets several independent trams live in one process and be addressed by
name. The registry only tracks instances; it never takes a controller's
lock, so trams stay fully isolated from each other.
"""

from __future__ import annotations

import dataclasses
import logging
import threading

from pytram.config import TramConfig
from pytram.controller import TramController, TransitionCallback
from pytram.exceptions import TramAlreadyExistsError, TramNotFoundError

_logger = logging.getLogger(__name__)


class TramRegistry:
    """Thread-safe map of tram name to :class:`TramController`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._trams: dict[str, TramController] = {}

    def start(
        self,
        name: str,
        config: TramConfig | None = None,
        *,
        on_transition: TransitionCallback | None = None,
    ) -> TramController:
        """Create and register a controller under *name*.

        The config's ``name`` is replaced with *name* so log records and
        lookups agree.
        """
        base = config or TramConfig(name=name)
        controller = TramController(
            dataclasses.replace(base, name=name),
            on_transition=on_transition,
        )
        with self._lock:
            if name in self._trams:
                raise TramAlreadyExistsError(f"Tram {name!r} is already running", name=name)
            self._trams[name] = controller
        _logger.info("Started tram %s", name)
        return controller

    def get(self, name: str) -> TramController:
        with self._lock:
            controller = self._trams.get(name)
        if controller is None:
            raise TramNotFoundError(f"Tram {name!r} not found", name=name)
        return controller

    def stop(self, name: str) -> None:
        """Unregister *name*; its last state is discarded."""
        with self._lock:
            controller = self._trams.pop(name, None)
        if controller is None:
            raise TramNotFoundError(f"Tram {name!r} not found", name=name)
        _logger.info("Stopped tram %s in mode %s", name, controller.state.mode.value)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._trams)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._trams

    def __len__(self) -> int:
        with self._lock:
            return len(self._trams)
