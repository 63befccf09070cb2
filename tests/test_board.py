"""Tests for PropertyBoard recomputation and last-write-wins."""

from __future__ import annotations

import asyncio

from conftest import KINGS_CROSS, SHOREDITCH, FakeBackend

from commute_planner.board import PropertyBoard
from commute_planner.schemas import Destination, Notification
from commute_planner.travel import TravelTimeService

SLOW = Destination(id="slow", name="Slow", address="slow")
FAST = Destination(id="fast", name="Fast", address="fast")


def _slow_backend() -> FakeBackend:
    return FakeBackend(
        places={"slow": KINGS_CROSS, "fast": SHOREDITCH},
        routes={KINGS_CROSS: (600.0, 3000.0), SHOREDITCH: (1200.0, 6000.0)},
        delays={"slow": 0.2},
    )


class TestSetDestinations:
    def test_applies_result_and_notifies(self, service, properties, destinations) -> None:
        received: list[Notification] = []
        board = PropertyBoard(service, properties, notify=received.append)

        applied = asyncio.run(board.set_destinations(destinations))

        assert applied is True
        assert all(len(p.travel_times) == 2 for p in board.properties)
        assert len(received) == 1
        assert received[0].title == "Travel Times Updated"
        assert not board.is_calculating

    def test_empty_destinations_clear_without_notification(
        self, service, properties, destinations
    ) -> None:
        received: list[Notification] = []
        board = PropertyBoard(service, properties, notify=received.append)
        asyncio.run(board.set_destinations(destinations))

        applied = asyncio.run(board.set_destinations([]))

        assert applied is True
        assert all(p.travel_times == [] for p in board.properties)
        assert len(received) == 1

    def test_no_properties(self, service, destinations) -> None:
        received: list[Notification] = []
        board = PropertyBoard(service, notify=received.append)

        assert asyncio.run(board.set_destinations(destinations)) is True
        assert board.properties == []
        assert received == []

    def test_properties_is_a_copy(self, service, properties) -> None:
        board = PropertyBoard(service, properties)
        board.properties.clear()
        assert len(board.properties) == 2


class TestOverlappingBatches:
    """A batch finishing after a newer trigger must not overwrite it."""

    def test_last_trigger_wins(self, properties) -> None:
        received: list[Notification] = []
        board = PropertyBoard(
            TravelTimeService(_slow_backend()), properties, notify=received.append
        )

        async def _run() -> list[bool]:
            first = asyncio.create_task(board.set_destinations([SLOW]))
            await asyncio.sleep(0.05)
            second = asyncio.create_task(board.set_destinations([FAST]))
            return list(await asyncio.gather(first, second))

        applied = asyncio.run(_run())

        assert applied == [False, True]
        for prop in board.properties:
            assert [e.destination_name for e in prop.travel_times] == ["Fast"]
        assert len(received) == 1

    def test_is_calculating_while_running(self, properties) -> None:
        board = PropertyBoard(TravelTimeService(_slow_backend()), properties)

        async def _run() -> tuple[bool, bool]:
            task = asyncio.create_task(board.set_destinations([SLOW]))
            await asyncio.sleep(0.05)
            during = board.is_calculating
            await task
            return during, board.is_calculating

        during, after = asyncio.run(_run())

        assert during is True
        assert after is False

    def test_replace_properties_supersedes_running_batch(self, properties) -> None:
        board = PropertyBoard(TravelTimeService(_slow_backend()), properties)

        async def _run() -> bool:
            task = asyncio.create_task(board.set_destinations([SLOW]))
            await asyncio.sleep(0.05)
            board.replace_properties(properties[:1])
            return await task

        applied = asyncio.run(_run())

        assert applied is False
        assert len(board.properties) == 1
        assert board.properties[0].travel_times == []


def test_board_is_exported_from_package() -> None:
    import commute_planner

    assert commute_planner.PropertyBoard is PropertyBoard
    assert "PropertyBoard" in commute_planner.__all__
