"""Concrete enemies: the floating Flotte and the patrolling Scarerun."""

from __future__ import annotations

from typing import Any

from . import config
from .enemy_base import EnemyBase, EnemyState
from .game_object import GameObject
from .resources import ResourceManager
from .vector2d import Vector2D

FLOTTE_IDLE = "resource/images/enemy/flotte/idle.png"
SCARERUN_IDLE = "resource/images/enemy/scarerun/idle.png"

SCARERUN_PATROL_DISTANCE = 30.0


class Flotte(EnemyBase):
    """A small floating enemy; it is placed and drawn by nothing yet."""

    def initialize(self) -> None:
        """Load the idle frames and size the collision."""
        resources = ResourceManager.get_instance()
        self.idle_img = list(resources.get_images(FLOTTE_IDLE, 4, 4, 1, 20, 20))
        self.image = self.idle_img[0]
        self.z_layer = 0
        self.collision.set_size(20, 20)
        self.collision.radius = 10

        if config.DEBUG:
            self.draw_collision_box = False
            self.draw_collision_circle = True

        self.set_enemy_state(EnemyState.IDLE)
        super().initialize()

    def update(self, delta_second: float) -> None:
        """Flotte does not act yet."""

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Flotte is not drawn yet."""

    def finalize(self) -> None:
        """Nothing to release."""

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Flotte ignores collisions."""

    def movement(self, distance: float) -> None:
        """Flotte does not move yet."""


class Scarerun(EnemyBase):
    """A ground enemy that patrols back and forth from where it spawned."""

    def initialize(self) -> None:
        """Load the frames, size the collision and start idle."""
        resources = ResourceManager.get_instance()
        self.idle_img = list(resources.get_images(SCARERUN_IDLE, 4, 4, 1, 46, 40))
        self.die_img = list(resources.get_images(SCARERUN_IDLE, 4, 4, 1, 46, 40))

        self.img_size = Vector2D(10, 5)
        self.image = self.idle_img[0]
        self.z_layer = 0
        self.collision.set_size(46, 40)
        self.collision.radius = 20

        if config.DEBUG:
            self.draw_collision_box = False
            self.draw_collision_circle = False
            self.draw_collision_capsule = True

        self.set_enemy_state(EnemyState.IDLE)
        super().initialize()

    def update(self, delta_second: float) -> None:
        """Move, patrol while idle, die at zero hit points, then animate."""
        super().update(delta_second)

        if self.now_state is EnemyState.IDLE:
            self.movement(SCARERUN_PATROL_DISTANCE)
        if self.hp <= 0:
            self.set_enemy_state(EnemyState.DIE)
            self.velocity = Vector2D(0.0)

        self.animation(delta_second)

    def finalize(self) -> None:
        """Forget the idle frames."""
        self.idle_img.clear()
        super().finalize()

    def movement(self, distance: float) -> None:
        """Patrol ``distance`` to the left of the spawn point."""
        super().movement(distance)