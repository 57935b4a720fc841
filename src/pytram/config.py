"""Controller configuration for pytram."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pytram.exceptions import TramConfigError

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})
_FALSY = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise TramConfigError(f"Cannot interpret {value!r} as a boolean")


@dataclasses.dataclass(frozen=True)
class TramConfig:
    """Controller configuration.

    Parameters
    ----------
    name : str
        Human-readable tram name. Shows up in log records and is the
        default key when the controller is hosted by a registry.
    trace_enabled : bool
        Log every dispatched event at DEBUG level together with the
        state before and after it, including rejected events.
    """

    name: str = "tram"
    trace_enabled: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise TramConfigError("Tram name must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> TramConfig:
        """Create configuration from environment variables.

        Reads ``TRAM_NAME`` and ``TRAM_TRACE_ENABLED``. Explicit keyword
        arguments override environment values.

        Raises
        ------
        TramConfigError
            If an environment value cannot be interpreted.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        name_env = env.get("TRAM_NAME")
        if name_env is not None:
            config_kwargs["name"] = name_env

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("TRAM_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
