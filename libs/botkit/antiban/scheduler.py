"""ActionScheduler — weighted, time-gated anti-ban action picker."""

import logging
import random
import time
from collections.abc import Callable, Iterable, Sequence

from botkit.antiban.actions import ActionKind, WeightedAction, default_actions
from botkit.antiban.performer import ActionPerformer, describe, perform

logger = logging.getLogger(__name__)

LOG_PREFIX = "[ANTI BAN:] "

DEFAULT_MIN_DELAY_MS = 10_000
DEFAULT_MAX_DELAY_MS = 60_000


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


def pick_from_wheel(actions: Sequence[WeightedAction], index: int) -> ActionKind:
    """Return the kind occupying slot `index` of the weight wheel.

    Each entry owns a contiguous run of slots equal to its weight, laid out
    in list order.

    Raises:
        IndexError: If index is outside [0, total weight).
    """
    if index < 0:
        raise IndexError(f"Wheel index out of range: {index}")
    remaining = index
    for action in actions:
        if remaining < action.weight:
            return action.kind
        remaining -= action.weight
    raise IndexError(f"Wheel index out of range: {index}")


class ActionScheduler:
    """Picks and runs anti-ban actions at random intervals.

    Usage:
        antiban = ActionScheduler(performer, 10_000, 60_000)
        if antiban.should_execute():
            antiban.execute()

    Weights live on this instance's entries, so changing them never affects
    another scheduler or the default weights of ActionKind.
    """

    def __init__(
        self,
        performer: ActionPerformer,
        min_delay: int = DEFAULT_MIN_DELAY_MS,
        max_delay: int = DEFAULT_MAX_DELAY_MS,
        actions: Iterable[ActionKind | WeightedAction] | None = None,
        *,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if min_delay < 0 or max_delay < 0:
            raise ValueError(f"Delays must be >= 0, got ({min_delay}, {max_delay})")
        if min_delay > max_delay:
            raise ValueError(f"min_delay {min_delay} is greater than max_delay {max_delay}")

        self._performer = performer
        self._min_delay = min_delay
        self._max_delay = max_delay
        self._clock = clock or monotonic_ms
        self._rng = rng or random.Random()

        if actions is None:
            self._actions = default_actions()
        else:
            self._actions = [self._coerce(a) for a in actions]

        self._next_execute_time = self._schedule_next()

    @property
    def min_delay(self) -> int:
        return self._min_delay

    @property
    def max_delay(self) -> int:
        return self._max_delay

    @property
    def next_execute_time(self) -> float:
        return self._next_execute_time

    @property
    def actions(self) -> tuple[WeightedAction, ...]:
        return tuple(self._actions)

    @property
    def total_weight(self) -> int:
        return sum(action.weight for action in self._actions)

    def should_execute(self) -> bool:
        """True once the current time has passed the next eligible time."""
        return self._clock() > self._next_execute_time

    def execute(self) -> ActionKind | None:
        """Perform one weighted-random action and reschedule.

        Returns the kind that was performed, or None when nothing can be
        drawn (empty list or all weights zero).
        """
        total = self.total_weight
        if total <= 0:
            logger.debug("No weighted actions to pick from, skipping")
            return None

        index = self._rng.randrange(total)
        kind = pick_from_wheel(self._actions, index)

        logger.info("%s%s", LOG_PREFIX, describe(kind))
        try:
            perform(self._performer, kind)
        finally:
            # A failed action still waits a full interval before the next one
            self._next_execute_time = self._schedule_next()
        logger.debug(
            "Picked %s (slot %d of %d), next action at %.0f",
            kind,
            index,
            total,
            self._next_execute_time,
        )
        return kind

    def add_action(self, kind: ActionKind, weight: int | None = None) -> None:
        """Append an action; `weight` overrides the default for this entry only."""
        if weight is None:
            self._actions.append(WeightedAction.default(kind))
        else:
            self._actions.append(WeightedAction(kind=kind, weight=weight))

    def set_weight(self, kind: ActionKind, weight: int) -> None:
        """Change the weight of every entry of `kind` in this scheduler."""
        self._actions = [
            WeightedAction(kind=a.kind, weight=weight) if a.kind == kind else a
            for a in self._actions
        ]

    def add_all_actions(self) -> None:
        """Reset the action list to one default-weighted entry per kind."""
        self._actions = default_actions()

    def clear_actions(self) -> None:
        self._actions.clear()

    # --- Internals ---

    def _schedule_next(self) -> float:
        return self._clock() + self._rng.randint(self._min_delay, self._max_delay)

    @staticmethod
    def _coerce(action: ActionKind | WeightedAction) -> WeightedAction:
        if isinstance(action, WeightedAction):
            return action
        return WeightedAction.default(ActionKind(action))
