from __future__ import annotations

import asyncio

import pytest

from pytram.controller import AsyncTramController
from pytram.models import TramMode, TramState


@pytest.mark.asyncio
async def test_full_route() -> None:
    tram = AsyncTramController()

    assert (await tram.add_driver()).ok
    assert (await tram.leave_depot()).ok
    assert (await tram.arrive_at_stop(3)).message == "Tram arrived at stop 3"
    assert (await tram.open_doors()).ok
    assert not (await tram.start_moving()).ok
    assert (await tram.close_doors()).ok
    assert (await tram.start_moving()).ok
    assert (await tram.return_to_depot()).ok
    assert (await tram.remove_driver()).ok

    assert tram.state == TramState.initial()


@pytest.mark.asyncio
async def test_concurrent_departures_only_one_wins() -> None:
    tram = AsyncTramController()
    await tram.add_driver()

    results = await asyncio.gather(*(tram.leave_depot() for _ in range(10)))

    assert sum(r.ok for r in results) == 1
    assert tram.state.mode == TramMode.MOVING


@pytest.mark.asyncio
async def test_rejection_after_driver_removal_keeps_state() -> None:
    tram = AsyncTramController()

    result = await tram.remove_driver()

    assert result.ok
    result = await tram.return_to_depot()
    assert not result.ok
    assert result.message == "Invalid action return_to_depot for current state in_depot"
    assert tram.state == TramState.initial()
