"""botkit — anti-ban scheduling and item requirement checks for bot scripts."""

from botkit.antiban import (
    DEFAULT_WEIGHTS,
    LOG_PREFIX,
    ActionKind,
    ActionPerformer,
    ActionScheduler,
    WeightedAction,
    pick_from_wheel,
)
from botkit.client import GAME_VIEWPORT, ClientActionPerformer, GameClient, SceneObject, ScreenRect
from botkit.items import (
    HeldItem,
    ItemRequirement,
    RequiredItem,
    base_name,
    compute_missing,
    format_report,
    parse_charge,
)
from botkit.script import BotScript

__all__ = [
    # Anti-ban
    "ActionKind",
    "ActionPerformer",
    "ActionScheduler",
    "DEFAULT_WEIGHTS",
    "LOG_PREFIX",
    "WeightedAction",
    "pick_from_wheel",
    # Client
    "ClientActionPerformer",
    "GAME_VIEWPORT",
    "GameClient",
    "SceneObject",
    "ScreenRect",
    # Items
    "HeldItem",
    "ItemRequirement",
    "RequiredItem",
    "base_name",
    "compute_missing",
    "format_report",
    "parse_charge",
    # Script SDK
    "BotScript",
]
