"""Unit tests for the BotScript base class and the Idler agent."""

import asyncio
import logging
import random
import threading

import pytest
from botkit import (
    ActionKind,
    ActionScheduler,
    BotScript,
    ClientActionPerformer,
    HeldItem,
    RequiredItem,
)

from agents.idler.agent import IdlerScript
from agents.idler.strategy import READY, RECHECK_EVERY, RESTOCK, should_recheck, status
from agents.idler.world import SimulatedClient, SimulatedObject, demo_client
from tests.fakes import FailingPerformer, RecordingPerformer


class CountingScript(BotScript):
    SCRIPT_NAME = "Counter"
    REQUIRED_ITEMS = [RequiredItem(name="Coins", amount=10)]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.loops = 0

    def on_loop(self) -> None:
        self.loops += 1


class FailingScript(CountingScript):
    def on_loop(self) -> None:
        super().on_loop()
        raise RuntimeError("boom")


class StrictScript(CountingScript):
    STOP_ON_MISSING = True


class StuckMenuClient(SimulatedClient):
    """Client whose right-click menu stays open until released."""

    def __init__(self, release: threading.Event) -> None:
        super().__init__(scene=[SimulatedObject(name="Tree")], menu_close_after=10**9)
        self.release = release

    def is_menu_open(self) -> bool:
        return self.menu_open and not self.release.wait(0.005)


def _make_scheduler(clock, performer=None) -> ActionScheduler:
    return ActionScheduler(
        performer or RecordingPerformer(), 100, 200, clock=clock, rng=random.Random(1)
    )


def _client(coins: int = 10) -> SimulatedClient:
    return SimulatedClient(inventory=[HeldItem(name="Coins", amount=coins)])


class TestStep:
    def test_runs_on_loop(self, clock):
        script = CountingScript(_client(), _make_scheduler(clock))
        script.step()
        assert script.loops == 1

    def test_no_antiban_before_due(self, clock, performer):
        script = CountingScript(_client(), _make_scheduler(clock, performer))
        script.step()
        assert performer.performed == []

    def test_antiban_when_due(self, clock, performer):
        script = CountingScript(_client(), _make_scheduler(clock, performer))
        clock.advance(500)
        script.step()
        script.step()
        assert len(performer.performed) == 1
        assert script.loops == 2

    def test_on_loop_error_logged(self, clock, caplog):
        script = FailingScript(_client(), _make_scheduler(clock))
        with caplog.at_level(logging.ERROR, logger="botkit.script.base"):
            script.step()
            script.step()
        assert script.loops == 2
        assert any("error in on_loop" in m for m in caplog.messages)

    def test_antiban_error_logged(self, clock, caplog):
        failing = FailingPerformer()
        script = CountingScript(_client(), _make_scheduler(clock, failing))
        clock.advance(500)
        with caplog.at_level(logging.ERROR, logger="botkit.script.base"):
            script.step()
            script.step()
        assert failing.attempts == 1
        assert script.loops == 2
        assert any("error in anti-ban action" in m for m in caplog.messages)

    def test_required_items_default_is_immutable(self):
        assert BotScript.REQUIRED_ITEMS == ()


class TestCheckRequirements:
    def test_nothing_missing(self, clock):
        script = CountingScript(_client(coins=10), _make_scheduler(clock))
        assert script.check_requirements() == {}
        assert script.missing == {}

    def test_missing_logged(self, clock, caplog):
        script = CountingScript(_client(coins=4), _make_scheduler(clock))
        with caplog.at_level(logging.WARNING, logger="botkit.script.base"):
            assert script.check_requirements() == {"Coins": 6}
        assert any("Missing Item: Coins | Quantity: 6" in m for m in caplog.messages)

    def test_equipment_counts(self, clock):
        client = SimulatedClient(equipment=[HeldItem(name="Coins", amount=10)])
        script = CountingScript(client, _make_scheduler(clock))
        assert script.check_requirements() == {}

    def test_missing_is_a_copy(self, clock):
        script = CountingScript(_client(coins=4), _make_scheduler(clock))
        script.check_requirements()
        script.missing.clear()
        assert script.missing == {"Coins": 6}


class TestDefaultScheduler:
    def test_reads_delays_from_env(self, monkeypatch):
        monkeypatch.setenv("ANTIBAN_MIN_DELAY_MS", "1000")
        monkeypatch.setenv("ANTIBAN_MAX_DELAY_MS", "2000")
        script = CountingScript(_client())
        assert script.antiban.min_delay == 1000
        assert script.antiban.max_delay == 2000
        assert script.antiban.total_weight == 11


class TestLifecycle:
    async def test_start_runs_loop(self, clock, monkeypatch):
        monkeypatch.setenv("SCRIPT_LOOP_INTERVAL", "0.01")
        script = CountingScript(_client(), _make_scheduler(clock))
        await script.start()
        assert script.is_running
        await asyncio.sleep(0.1)
        await script.stop()
        assert not script.is_running
        assert script.loops > 1

    async def test_stop_before_start(self, clock):
        script = CountingScript(_client(), _make_scheduler(clock))
        await script.stop()
        assert not script.is_running

    async def test_strict_script_refuses_to_start(self, clock):
        script = StrictScript(_client(coins=0), _make_scheduler(clock))
        await script.start()
        assert not script.is_running
        assert script.missing == {"Coins": 10}

    async def test_lenient_script_starts_anyway(self, clock, monkeypatch):
        monkeypatch.setenv("SCRIPT_LOOP_INTERVAL", "0.01")
        script = CountingScript(_client(coins=0), _make_scheduler(clock))
        await script.start()
        assert script.is_running
        await script.stop()

    async def test_loop_survives_antiban_error(self, clock, monkeypatch):
        monkeypatch.setenv("SCRIPT_LOOP_INTERVAL", "0.01")
        failing = FailingPerformer()
        antiban = ActionScheduler(failing, 0, 0, clock=clock)
        script = CountingScript(_client(), antiban)
        await script.start()
        clock.advance(1)
        await asyncio.sleep(0.1)
        assert script.is_running
        assert failing.attempts == 1
        assert script.loops > 1
        await script.stop()
        assert not script.is_running

    async def test_stop_returns_while_menu_stuck(self, clock, monkeypatch):
        monkeypatch.setenv("SCRIPT_LOOP_INTERVAL", "0.01")
        release = threading.Event()
        client = StuckMenuClient(release)
        antiban = ActionScheduler(
            ClientActionPerformer(client, max_menu_moves=None),
            0,
            0,
            [ActionKind.RIGHT_CLICK_RANDOM_OBJECT],
            clock=clock,
        )
        script = CountingScript(client, antiban)
        await script.start()
        clock.advance(1)
        await asyncio.sleep(0.1)
        try:
            assert client.menu_open
            await asyncio.wait_for(script.stop(), timeout=2.0)
        finally:
            release.set()
        assert not script.is_running


class TestIdlerStrategy:
    def test_status(self):
        assert status({}) == READY
        assert status({"Coins": 1}) == RESTOCK

    def test_should_recheck(self):
        assert not should_recheck(0)
        assert not should_recheck(1)
        assert should_recheck(RECHECK_EVERY)
        assert should_recheck(RECHECK_EVERY * 3)


class TestIdlerScript:
    def test_demo_client_is_short_on_supplies(self, clock):
        script = IdlerScript(demo_client(), _make_scheduler(clock))
        assert script.check_requirements() == {"Coins": 2_500, "Shark": 10}

    def test_status_reported(self, clock):
        script = IdlerScript(demo_client(), _make_scheduler(clock))
        script.check_requirements()
        script.step()
        assert script.last_status == RESTOCK

    def test_rechecks_inventory(self, clock):
        client = demo_client()
        script = IdlerScript(client, _make_scheduler(clock))
        script.check_requirements()
        client.inventory = [
            HeldItem(name="Coins", amount=5_000),
            HeldItem(name="Prayer potion(4)", amount=2),
            HeldItem(name="Shark", amount=50, noted=True),
        ]
        for _ in range(RECHECK_EVERY):
            script.step()
        assert script.missing == {}
        assert script.last_status == READY

    async def test_runs_antiban_in_loop(self, clock, monkeypatch):
        monkeypatch.setenv("SCRIPT_LOOP_INTERVAL", "0.01")
        client = demo_client()
        script = IdlerScript(
            client,
            ActionScheduler(
                RecordingPerformer(), 0, 0, [ActionKind.MOVE_MOUSE], clock=clock
            ),
        )
        await script.start()
        clock.advance(1)
        await asyncio.sleep(0.05)
        await script.stop()
        assert script.antiban.next_execute_time == clock.now


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("ANTIBAN_MIN_DELAY_MS", "ANTIBAN_MAX_DELAY_MS", "SCRIPT_LOOP_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
