"""A test arena that spawns a row of bosses."""

from __future__ import annotations

from typing import Any

from .boss import Vaillant
from .config import WIN_MAX_X, WIN_MAX_Y
from .input import KEY_0, get_input
from .scene_base import SceneBase, SceneType
from .vector2d import Vector2D

BOSS_COUNT = 3
BOSS_SPACING = 220.0
BOSS_Y = 430.0
BACKGROUND = (100, 100, 100)


class DebugBossScene(SceneBase):
    """Shows several bosses on a plain background; 0 returns to the title."""

    boss_class: type[Vaillant] = Vaillant

    def __init__(self) -> None:
        super().__init__()
        self.vaillants: list[Vaillant] = []

    def initialize(self) -> None:
        """Spawn the bosses in a row."""
        self.vaillants = [
            self.create_object(self.boss_class, Vector2D((i + 1) * BOSS_SPACING, BOSS_Y))
            for i in range(BOSS_COUNT)
        ]
        super().initialize()

    def update(self, delta_second: float) -> SceneType:
        """Return to the title on 0, otherwise update the bosses."""
        if get_input().get_key_state(KEY_0):
            return SceneType.TITLE
        return super().update(delta_second)

    def draw(self, canvas: Any) -> None:
        """Fill the background, then draw the bosses."""
        canvas.draw_box(0, 0, WIN_MAX_X, WIN_MAX_Y, BACKGROUND, True)
        super().draw(canvas)

    def finalize(self) -> None:
        """Drop every object."""
        super().finalize()

    def now_scene_type(self) -> SceneType:
        """This is the boss debug scene."""
        return SceneType.DEBUG_BOSS