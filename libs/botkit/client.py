"""GameClient capability and the performer that drives it for anti-ban."""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from botkit.items.models import HeldItem

logger = logging.getLogger(__name__)

MAX_CAMERA_PITCH = 67
MAX_CAMERA_YAW = 359

# Mouse moves to spend closing a right-click menu before giving up
DEFAULT_MAX_MENU_MOVES = 20


class SceneObject(Protocol):
    """A world object as exposed by the client."""

    def is_visible(self) -> bool: ...

    def hover(self) -> None: ...


class GameClient(Protocol):
    """The narrow slice of the game API this library relies on."""

    def move_mouse(self, x: int, y: int) -> None: ...

    def click_mouse(self, right: bool = False) -> None: ...

    def lowest_pitch_angle(self) -> int: ...

    def move_pitch(self, angle: int) -> None: ...

    def move_yaw(self, angle: int) -> None: ...

    def objects(self) -> Sequence[SceneObject]: ...

    def is_menu_open(self) -> bool: ...

    def inventory_items(self) -> Sequence[HeldItem | None]: ...

    def equipment_items(self) -> Sequence[HeldItem | None]: ...


@dataclass(frozen=True)
class ScreenRect:
    """Inclusive screen rectangle, in client pixels."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def random_point(self, rng: random.Random) -> tuple[int, int]:
        return rng.randint(self.min_x, self.max_x), rng.randint(self.min_y, self.max_y)

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


# The game viewport, excluding chat box and side panels
GAME_VIEWPORT = ScreenRect(min_x=43, max_x=538, min_y=47, max_y=396)


class ClientActionPerformer:
    """ActionPerformer backed by a GameClient."""

    def __init__(
        self,
        client: GameClient,
        viewport: ScreenRect = GAME_VIEWPORT,
        rng: random.Random | None = None,
        max_menu_moves: int | None = DEFAULT_MAX_MENU_MOVES,
    ) -> None:
        self._client = client
        self._viewport = viewport
        self._rng = rng or random.Random()
        self._max_menu_moves = max_menu_moves

    def move_mouse_randomly(self) -> None:
        x, y = self._viewport.random_point(self._rng)
        self._client.move_mouse(x, y)

    def rotate_camera_randomly(self) -> None:
        lowest = min(self._client.lowest_pitch_angle(), MAX_CAMERA_PITCH)
        self._client.move_pitch(self._rng.randint(lowest, MAX_CAMERA_PITCH))
        self._client.move_yaw(self._rng.randint(0, MAX_CAMERA_YAW))

    def right_click_random_visible_object(self) -> None:
        """Right-click a random visible object, then move the mouse until the menu closes.

        Does nothing when no object is visible. Gives up after max_menu_moves
        moves with the menu still open; None waits for as long as it takes.
        """
        visible = [obj for obj in self._client.objects() if obj.is_visible()]
        if not visible:
            logger.debug("No visible objects to right-click")
            return

        obj = self._rng.choice(visible)
        obj.hover()
        self._client.click_mouse(right=True)

        moves = 0
        while self._client.is_menu_open():
            if self._max_menu_moves is not None and moves >= self._max_menu_moves:
                logger.warning("Menu still open after %d mouse moves, giving up", moves)
                return
            self.move_mouse_randomly()
            moves += 1
