"""Script SDK — polling-loop scripts with anti-ban and item checks built in."""

from botkit.script.base import DEFAULT_LOOP_INTERVAL, BotScript

__all__ = [
    "DEFAULT_LOOP_INTERVAL",
    "BotScript",
]
