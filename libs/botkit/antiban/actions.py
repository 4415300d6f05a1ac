"""Anti-ban action kinds and their per-scheduler weights."""

from dataclasses import dataclass
from enum import StrEnum


class ActionKind(StrEnum):
    """All idle actions the scheduler can pick from."""

    MOVE_MOUSE = "move_mouse"
    ROTATE_CAMERA = "rotate_camera"
    RIGHT_CLICK_RANDOM_OBJECT = "right_click_random_object"

    @property
    def default_weight(self) -> int:
        return DEFAULT_WEIGHTS[self]


# Higher weight = more likely to be picked. Equal weights are equally likely.
DEFAULT_WEIGHTS: dict[ActionKind, int] = {
    ActionKind.MOVE_MOUSE: 3,
    ActionKind.ROTATE_CAMERA: 7,
    ActionKind.RIGHT_CLICK_RANDOM_OBJECT: 1,
}


@dataclass(frozen=True)
class WeightedAction:
    """One entry in a scheduler's action list.

    The same kind may appear more than once; each entry contributes its own
    weight to the wheel.
    """

    kind: ActionKind
    weight: int

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Weight must be >= 0, got {self.weight} for {self.kind}")

    @classmethod
    def default(cls, kind: ActionKind) -> "WeightedAction":
        return cls(kind=kind, weight=kind.default_weight)


def default_actions() -> list[WeightedAction]:
    """One entry per action kind, each at its default weight."""
    return [WeightedAction.default(kind) for kind in ActionKind]
