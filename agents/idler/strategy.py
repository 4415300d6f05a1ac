"""Idler strategy — pure function, no client I/O.

The idler stands still and lets anti-ban run. It only decides whether the
trip's supplies are complete and when to look at the inventory again.
"""

from botkit.items.models import RequiredItem

REQUIRED_ITEMS: list[RequiredItem] = [
    RequiredItem(name="Coins", amount=5_000),
    RequiredItem(name="Prayer potion(3)", amount=2, charge_range=1),
    RequiredItem(name="Shark", amount=50, noted=True),
    RequiredItem(name="Ring of dueling(1)", charge_range=7),
]

# Loops between inventory re-checks
RECHECK_EVERY = 100

READY = "ready"
RESTOCK = "restock"


def status(missing: dict[str, int]) -> str:
    """READY when nothing is missing, RESTOCK otherwise."""
    return RESTOCK if missing else READY


def should_recheck(loop_count: int) -> bool:
    return loop_count > 0 and loop_count % RECHECK_EVERY == 0
