"""BotScript — base class for polling-loop scripts."""

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence

from botkit.antiban.scheduler import (
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MIN_DELAY_MS,
    ActionScheduler,
)
from botkit.client import ClientActionPerformer, GameClient
from botkit.items.models import RequiredItem
from botkit.items.requirements import ItemRequirement, format_report

logger = logging.getLogger(__name__)

DEFAULT_LOOP_INTERVAL = 0.6  # seconds, one game tick


class BotScript(ABC):
    """Base class for scripts run by the host loop.

    Subclasses set SCRIPT_NAME and REQUIRED_ITEMS and implement on_loop().
    Each loop iteration runs an anti-ban action when one is due, then the
    script's own work.
    """

    SCRIPT_NAME: str = ""
    REQUIRED_ITEMS: Sequence[RequiredItem] = ()
    # Refuse to start while any required item is missing
    STOP_ON_MISSING: bool = False

    def __init__(
        self,
        client: GameClient,
        antiban: ActionScheduler | None = None,
    ) -> None:
        self._client = client
        if antiban is None:
            antiban = ActionScheduler(
                ClientActionPerformer(client),
                int(os.environ.get("ANTIBAN_MIN_DELAY_MS", DEFAULT_MIN_DELAY_MS)),
                int(os.environ.get("ANTIBAN_MAX_DELAY_MS", DEFAULT_MAX_DELAY_MS)),
            )
        self._antiban = antiban
        self._requirement = ItemRequirement(self.REQUIRED_ITEMS)
        self._loop_interval = float(
            os.environ.get("SCRIPT_LOOP_INTERVAL", DEFAULT_LOOP_INTERVAL)
        )
        self._missing: dict[str, int] = {}
        self._running = False
        self._loop_task: asyncio.Task[None] | None = None

    @property
    def antiban(self) -> ActionScheduler:
        return self._antiban

    @property
    def requirement(self) -> ItemRequirement:
        return self._requirement

    @property
    def missing(self) -> dict[str, int]:
        """Result of the last requirement check."""
        return dict(self._missing)

    @property
    def is_running(self) -> bool:
        return self._running

    @abstractmethod
    def on_loop(self) -> None:
        """One iteration of the script's own work."""

    def check_requirements(self) -> dict[str, int]:
        """Check inventory and equipment against REQUIRED_ITEMS."""
        held = [*self._client.inventory_items(), *self._client.equipment_items()]
        self._missing = self._requirement.missing_items(held)
        if self._missing:
            logger.warning(
                "%s is missing items:\n%s",
                self.SCRIPT_NAME,
                format_report(self._missing).rstrip("\n"),
            )
        else:
            logger.info("%s has all required items", self.SCRIPT_NAME)
        return self.missing

    def step(self) -> None:
        """Run one loop iteration: anti-ban if due, then on_loop().

        Errors from either are logged and the loop carries on.
        """
        if self._antiban.should_execute():
            try:
                self._antiban.execute()
            except Exception:
                logger.exception("%s: error in anti-ban action", self.SCRIPT_NAME)
        try:
            self.on_loop()
        except Exception:
            logger.exception("%s: error in on_loop", self.SCRIPT_NAME)

    async def start(self) -> None:
        """Check requirements and start the polling loop."""
        self.check_requirements()
        if self._missing and self.STOP_ON_MISSING:
            logger.error("%s not started: required items missing", self.SCRIPT_NAME)
            return

        self._running = True
        self._loop_task = asyncio.create_task(self._run_loop())
        logger.info(
            "%s started (loop interval: %.2fs, anti-ban every %d-%dms)",
            self.SCRIPT_NAME,
            self._loop_interval,
            self._antiban.min_delay,
            self._antiban.max_delay,
        )

    async def stop(self) -> None:
        """Clean shutdown."""
        self._running = False
        if self._loop_task is not None:
            self._loop_task.cancel()
            try:
                await self._loop_task
            except asyncio.CancelledError:
                pass
            self._loop_task = None
        logger.info("%s stopped", self.SCRIPT_NAME)

    async def _run_loop(self) -> None:
        # step() can block on the client, so it runs off the event loop
        while self._running:
            await asyncio.to_thread(self.step)
            await asyncio.sleep(self._loop_interval)
