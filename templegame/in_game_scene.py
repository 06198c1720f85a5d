"""The main game scene: player, scrolling stage and enemies."""

from __future__ import annotations

from typing import Any

from .config import WIN_MAX_X
from .enemies import Scarerun
from .game_ui import GameUI
from .player import Player
from .scene_base import SceneBase, SceneType
from .stage import Stage
from .vector2d import Vector2D

PLAYER_START = Vector2D(100.0, 400.0)
STAGE_START = Vector2D(640.0, 360.0)
ENEMY_COUNT = 3
ENEMY_SPACING = 25.0
ENEMY_Y = 430.0
SCROLL_LEFT_EDGE = 100.0


class InGameScene(SceneBase):
    """Keeps the player near the screen while the world scrolls past."""

    player_class: type[Player] = Player
    stage_class: type[Stage] = Stage
    enemy_class: type[Scarerun] = Scarerun

    def __init__(self) -> None:
        super().__init__()
        self.player: Player | None = None
        self.stage: Stage | None = None
        self.scareruns: list[Scarerun] = []

    def initialize(self) -> None:
        """Create the player, stage and enemies and set up the overlay."""
        self.player = self.create_object(self.player_class, PLAYER_START)
        self.stage = self.create_object(self.stage_class, STAGE_START)
        self.scareruns = [
            self.create_object(self.enemy_class, Vector2D((i + 1) * ENEMY_SPACING, ENEMY_Y))
            for i in range(ENEMY_COUNT)
        ]
        GameUI.get_instance().initialize()
        super().initialize()

    def update(self, delta_second: float) -> SceneType:
        """Update the objects, then scroll the world when the player nears an edge."""
        if self.player is None or self.stage is None:
            raise RuntimeError("scene is not initialized")

        super().update(delta_second)

        player = self.player
        if player.location.x >= WIN_MAX_X / 2 or player.location.x <= SCROLL_LEFT_EDGE:
            velocity = player.velocity.copy()
            shift = Vector2D(velocity.x, 0.0)
            self.stage.add_velocity(shift)
            for enemy in self.scareruns:
                enemy.add_velocity(shift)
            player.location = Vector2D(player.location.x - velocity.x, player.location.y)

        return self.now_scene_type()

    def draw(self, canvas: Any) -> None:
        """Draw the objects, then the overlay."""
        super().draw(canvas)
        GameUI.get_instance().draw(canvas)

    def finalize(self) -> None:
        """Drop every object."""
        super().finalize()

    def now_scene_type(self) -> SceneType:
        """This is the in-game scene."""
        return SceneType.IN_GAME