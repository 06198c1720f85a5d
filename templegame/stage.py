"""The scrolling stage background."""

from __future__ import annotations

from typing import Any

from .game_object import WHITE, GameObject
from .resources import ResourceManager
from .vector2d import Vector2D

STAGE_IMAGE = "resource/images/stage/stage1/2forest.png"


class Stage(GameObject):
    """Background image that scrolls opposite to the player."""

    def __init__(self) -> None:
        super().__init__()
        self.stage_background: list[int] = []
        self.draw_count = 0

    def initialize(self) -> None:
        """Load the background image."""
        resources = ResourceManager.get_instance()
        self.stage_background = resources.get_images(STAGE_IMAGE, 1)
        self.image = self.stage_background[0]

    def update(self, delta_second: float) -> None:
        """Move by the current velocity."""
        self.location += self.velocity

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw the background and its position readout."""
        super().draw(canvas, screen_offset)
        canvas.draw_text(0, 200, WHITE, f"location: {self.location.x:f}")
        canvas.draw_text(0, 220, WHITE, f"velocity: {self.velocity.x:f}")

    def finalize(self) -> None:
        """Forget the background handles."""
        self.stage_background.clear()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """The stage does not react to collisions beyond the base check."""
        super().on_hit_collision(hit_object)

    def add_velocity(self, v: Vector2D) -> None:
        """Scroll the stage back by ``v``."""
        self.location -= v