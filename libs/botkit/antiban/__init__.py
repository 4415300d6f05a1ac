"""Anti-ban — weighted idle actions on a randomized timer."""

from botkit.antiban.actions import DEFAULT_WEIGHTS, ActionKind, WeightedAction, default_actions
from botkit.antiban.performer import ActionPerformer, describe, perform
from botkit.antiban.scheduler import (
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MIN_DELAY_MS,
    LOG_PREFIX,
    ActionScheduler,
    pick_from_wheel,
)

__all__ = [
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_MIN_DELAY_MS",
    "DEFAULT_WEIGHTS",
    "LOG_PREFIX",
    "ActionKind",
    "ActionPerformer",
    "ActionScheduler",
    "WeightedAction",
    "default_actions",
    "describe",
    "perform",
    "pick_from_wheel",
]
