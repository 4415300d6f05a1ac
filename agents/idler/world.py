"""SimulatedClient — an in-memory GameClient for running scripts offline."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from botkit.items.models import HeldItem

logger = logging.getLogger(__name__)


@dataclass
class SimulatedObject:
    """A scene object that records being hovered."""

    name: str
    visible: bool = True
    hovered: bool = False

    def is_visible(self) -> bool:
        return self.visible

    def hover(self) -> None:
        self.hovered = True


@dataclass
class SimulatedClient:
    """Tracks mouse, camera and menu state without a real game.

    A right-click while hovering an object opens a menu, which closes again
    after `menu_close_after` mouse moves.
    """

    scene: list[SimulatedObject] = field(default_factory=list)
    inventory: list[HeldItem | None] = field(default_factory=list)
    equipment: list[HeldItem | None] = field(default_factory=list)
    lowest_pitch: int = 22
    menu_close_after: int = 1
    mouse: tuple[int, int] = (0, 0)
    pitch: int = 0
    yaw: int = 0
    menu_open: bool = False
    right_clicks: int = 0
    _moves_until_close: int = 0

    def move_mouse(self, x: int, y: int) -> None:
        self.mouse = (x, y)
        if self.menu_open:
            self._moves_until_close -= 1
            if self._moves_until_close <= 0:
                self.menu_open = False
        logger.debug("Mouse moved to (%d, %d)", x, y)

    def click_mouse(self, right: bool = False) -> None:
        if not right:
            return
        self.right_clicks += 1
        if any(obj.hovered for obj in self.scene):
            self.menu_open = True
            self._moves_until_close = self.menu_close_after

    def lowest_pitch_angle(self) -> int:
        return self.lowest_pitch

    def move_pitch(self, angle: int) -> None:
        self.pitch = angle
        logger.debug("Camera pitch %d", angle)

    def move_yaw(self, angle: int) -> None:
        self.yaw = angle
        logger.debug("Camera yaw %d", angle)

    def objects(self) -> Sequence[SimulatedObject]:
        return self.scene

    def is_menu_open(self) -> bool:
        return self.menu_open

    def inventory_items(self) -> Sequence[HeldItem | None]:
        return self.inventory

    def equipment_items(self) -> Sequence[HeldItem | None]:
        return self.equipment


def demo_client() -> SimulatedClient:
    """A client standing at a bank with a typical trip's supplies."""
    return SimulatedClient(
        scene=[
            SimulatedObject(name="Bank booth"),
            SimulatedObject(name="Tree"),
            SimulatedObject(name="Door", visible=False),
        ],
        inventory=[
            HeldItem(name="Coins", amount=2_500),
            HeldItem(name="Prayer potion(4)"),
            HeldItem(name="Prayer potion(3)"),
            HeldItem(name="Shark", amount=40, noted=True),
            None,
        ],
        equipment=[HeldItem(name="Ring of dueling(6)")],
    )
