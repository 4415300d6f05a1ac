"""Item requirements — compare declared needs against held items."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from botkit.items.models import HeldItem, RequiredItem
from botkit.items.names import match_key, parse_charge

logger = logging.getLogger(__name__)

REPORT_LINE = "Missing Item: {name} | Quantity: {count}\n"


@dataclass(frozen=True)
class _ParsedItem:
    """A held item with its name parsed once."""

    key: str
    charge: int
    amount: int
    noted: bool


def _parse_held(held: Iterable[HeldItem | None]) -> list[_ParsedItem]:
    return [
        _ParsedItem(
            key=match_key(item.name),
            charge=parse_charge(item.name),
            amount=item.amount,
            noted=item.noted,
        )
        for item in held
        if item is not None
    ]


def _held_count(requirement: RequiredItem, candidates: list[_ParsedItem]) -> int:
    """How many of `requirement` the candidates provide."""
    min_charge = parse_charge(requirement.name)
    if min_charge > 0:
        max_charge = min_charge + requirement.charge_range
        return sum(c.amount for c in candidates if min_charge <= c.charge <= max_charge)

    # One slot: stackable (or a single item), so use its stack size.
    # Several slots: probably not stackable, so each slot counts once.
    if len(candidates) == 1:
        return candidates[0].amount
    return len(candidates)


def compute_missing(
    requirements: Sequence[RequiredItem], held: Iterable[HeldItem | None]
) -> dict[str, int]:
    """Return (requirement name → missing amount) for every unmet requirement.

    An empty dict means everything is present. Requirements sharing a name
    overwrite each other; the last one wins.
    """
    parsed = _parse_held(held)
    missing: dict[str, int] = {}

    for requirement in requirements:
        key = match_key(requirement.name)
        candidates = [p for p in parsed if p.key == key and p.noted == requirement.noted]

        if not candidates:
            if requirement.amount > 0:
                missing[requirement.name] = requirement.amount
            continue

        count = _held_count(requirement, candidates)
        if count < requirement.amount:
            missing[requirement.name] = requirement.amount - count

        logger.debug(
            "%s: have %d of %d (noted=%s)",
            requirement.name,
            count,
            requirement.amount,
            requirement.noted,
        )

    return missing


def format_report(missing: Mapping[str, int]) -> str:
    """Render missing items, one newline-terminated line per entry."""
    return "".join(
        REPORT_LINE.format(name=name, count=count) for name, count in missing.items()
    )


class ItemRequirement:
    """A fixed list of required items that can be checked repeatedly.

    Usage:
        requirement = ItemRequirement([
            RequiredItem(name="Ring of dueling(1)", charge_range=7),
            RequiredItem(name="Coins", amount=10_000),
        ])
        missing = requirement.missing_items(client.inventory_items())
    """

    def __init__(self, items: Iterable[RequiredItem]) -> None:
        self._items = list(items)

    @property
    def items(self) -> tuple[RequiredItem, ...]:
        return tuple(self._items)

    def missing_items(self, held: Iterable[HeldItem | None]) -> dict[str, int]:
        """See compute_missing()."""
        return compute_missing(self._items, held)

    def is_satisfied(self, held: Iterable[HeldItem | None]) -> bool:
        return not self.missing_items(held)

    def report(self, held: Iterable[HeldItem | None]) -> str:
        """Missing-items report for `held`; empty string when nothing is missing."""
        return format_report(self.missing_items(held))
