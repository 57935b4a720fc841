from __future__ import annotations

import pytest

from pytram.config import TramConfig
from pytram.exceptions import TramAlreadyExistsError, TramConfigError, TramNotFoundError
from pytram.models import TramState
from pytram.registry import TramRegistry


def test_start_and_get() -> None:
    registry = TramRegistry()

    tram = registry.start("line-4")

    assert registry.get("line-4") is tram
    assert tram.name == "line-4"
    assert "line-4" in registry
    assert len(registry) == 1


def test_start_overrides_config_name() -> None:
    registry = TramRegistry()

    tram = registry.start("line-9", TramConfig(name="other", trace_enabled=True))

    assert tram.name == "line-9"
    assert tram.config.trace_enabled is True


def test_duplicate_name_rejected() -> None:
    registry = TramRegistry()
    registry.start("line-4")

    with pytest.raises(TramAlreadyExistsError) as exc_info:
        registry.start("line-4")

    assert exc_info.value.name == "line-4"


def test_empty_name_rejected() -> None:
    with pytest.raises(TramConfigError):
        TramRegistry().start("")


def test_unknown_name() -> None:
    registry = TramRegistry()

    with pytest.raises(TramNotFoundError):
        registry.get("ghost")
    with pytest.raises(TramNotFoundError):
        registry.stop("ghost")


def test_stop_removes_instance() -> None:
    registry = TramRegistry()
    registry.start("b")
    registry.start("a")

    registry.stop("b")

    assert registry.names() == ["a"]
    assert "b" not in registry


def test_registered_trams_are_isolated() -> None:
    registry = TramRegistry()
    first = registry.start("first")
    second = registry.start("second")

    first.add_driver()
    first.leave_depot()

    assert second.state == TramState.initial()
