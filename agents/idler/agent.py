"""IdlerScript — waits in place, runs anti-ban, watches its supplies."""

import logging

from botkit.antiban.scheduler import ActionScheduler
from botkit.client import GameClient
from botkit.script.base import BotScript

from agents.idler.strategy import REQUIRED_ITEMS, should_recheck, status

logger = logging.getLogger(__name__)


class IdlerScript(BotScript):
    SCRIPT_NAME = "Idler"
    REQUIRED_ITEMS = REQUIRED_ITEMS

    def __init__(self, client: GameClient, antiban: ActionScheduler | None = None) -> None:
        super().__init__(client, antiban)
        self.loop_count = 0
        self.last_status = ""

    def on_loop(self) -> None:
        self.loop_count += 1
        if should_recheck(self.loop_count):
            self.check_requirements()
        current = status(self.missing)
        if current != self.last_status:
            logger.info("%s status: %s", self.SCRIPT_NAME, current)
            self.last_status = current
