"""ActionPerformer — the capability the scheduler hands selected actions to."""

from collections.abc import Callable
from typing import Protocol

from botkit.antiban.actions import ActionKind


class ActionPerformer(Protocol):
    """Device-level side effects for each anti-ban action.

    Implementations talk to the game client; return values are ignored.
    """

    def move_mouse_randomly(self) -> None: ...

    def rotate_camera_randomly(self) -> None: ...

    def right_click_random_visible_object(self) -> None: ...


# Kind → (log description, handler)
_HANDLERS: dict[ActionKind, tuple[str, Callable[[ActionPerformer], None]]] = {
    ActionKind.MOVE_MOUSE: (
        "Moving mouse.",
        lambda performer: performer.move_mouse_randomly(),
    ),
    ActionKind.ROTATE_CAMERA: (
        "Rotating camera.",
        lambda performer: performer.rotate_camera_randomly(),
    ),
    ActionKind.RIGHT_CLICK_RANDOM_OBJECT: (
        "Right-clicking an object.",
        lambda performer: performer.right_click_random_visible_object(),
    ),
}


def describe(kind: ActionKind) -> str:
    """Return the human-readable description logged for an action kind."""
    return _HANDLERS[kind][0]


def perform(performer: ActionPerformer, kind: ActionKind) -> None:
    """Dispatch a single action kind to the performer."""
    _description, handler = _HANDLERS[kind]
    handler(performer)
