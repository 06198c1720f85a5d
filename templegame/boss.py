"""Bosses: a shared base and the Vaillant boss that wanders about."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from . import config
from .collision import ObjectType
from .config import get_fps_counter
from .game_object import GameObject
from .resources import ResourceManager
from .vector2d import Vector2D

VAILLANT_IMAGES = "resource/images/enemy_boss/vaillant"

IDLE_FRAME_TIME = 0.075
WALK_FRAME_TIME = 0.1
LAST_FRAME = 15
WANDER_SPEED = 0.25


def _frame_scale() -> float:
    fps = get_fps_counter().get()
    return config.FPS / fps if fps > 0 else 1.0


class BossBase(GameObject):
    """Base for bosses: moves at a frame-rate independent speed."""

    _instance: BossBase | None = None

    @classmethod
    def get_instance(cls) -> BossBase:
        """The shared boss, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self) -> None:
        """Make the boss block and react to players, enemies and ground."""
        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.ENEMY
        self.collision.hit_object_type = [ObjectType.PLAYER, ObjectType.ENEMY, ObjectType.GROUND]

    def update(self, delta_second: float) -> None:
        """Move, sync the collision, then animate and steer."""
        self.location += self.velocity * _frame_scale()
        self.collision.position = self.location.copy()
        self.animation(delta_second)
        self.movement(delta_second)

    def animation(self, delta_second: float) -> None:
        """Advance the animation; nothing by default."""

    def movement(self, delta_second: float) -> None:
        """Choose the velocity; nothing by default."""

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Ignore collisions by default."""

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw the boss."""
        super().draw(canvas, screen_offset)

    def finalize(self) -> None:
        """Release nothing by default."""

    def add_velocity(self, v: Vector2D) -> None:
        """Scroll the boss back by ``v``."""
        self.location -= v


class VaillantState(Enum):
    """What Vaillant is doing."""

    IDLE = 0
    WALK = 1
    DAMAGE = 2
    DIE = 3


class Vaillant(BossBase):
    """A boss that wanders left and right at random."""

    def __init__(self) -> None:
        super().__init__()
        self.idle_images: list[int] = []
        self.walk_images: list[int] = []
        self.idle_animation_state = 0
        self.walk_animation_state = 0
        self.idle_animation_time = 0.0
        self.walk_animation_time = 0.0
        self.state = VaillantState.IDLE
        self.rng: random.Random = random.Random()
        self._wander_time = 0.0
        self._wander_roll = 0

    def initialize(self) -> None:
        """Load the idle and walk sheets and size the collision."""
        super().initialize()
        resources = ResourceManager.get_instance()
        self.idle_images = resources.get_images(
            f"{VAILLANT_IMAGES}/idle.png", 16, 16, 1, 450, 360
        )
        self.walk_images = resources.get_images(
            f"{VAILLANT_IMAGES}/walk.png", 16, 16, 1, 450, 360
        )
        self.image = self.idle_images[self.idle_animation_state]
        self.img_size = Vector2D(200.0, 220.0)
        self.collision.radius = 80.0

    def update(self, delta_second: float) -> None:
        """Move, pick a new wander direction every second, and size the collision."""
        super().update(delta_second)

        self._wander_time += delta_second * _frame_scale()
        if self._wander_time >= 1.0:
            self._wander_time = 0.0
            self._wander_roll = self.rng.randint(0, 10)
            self.velocity = Vector2D(0.0)

        roll = self._wander_roll
        if 0 < roll <= 3:
            self.velocity.x = -WANDER_SPEED
        if 3 < roll <= 7:
            self.velocity.x = WANDER_SPEED
        if roll == 8:
            self.flip_flag = True
        if roll == 9:
            self.flip_flag = False

        half_height = self.img_size.y / 2.0
        self.collision.start_point = Vector2D(self.location.x, self.location.y - half_height)
        self.collision.end_point = Vector2D(self.location.x, self.location.y + half_height)

        self.collision.set_size(200.0, 220.0)
        self.collision.pivot = Vector2D(12.0 if self.flip_flag else -12.0, 27.0)

        if self.velocity.x == 0.0 and self.velocity.y == 0.0:
            self.state = VaillantState.IDLE
        else:
            self.state = VaillantState.WALK

    def animation(self, delta_second: float) -> None:
        """Step through the idle or walk frames."""
        super().animation(delta_second)
        scale = _frame_scale()

        if self.state is VaillantState.IDLE:
            self.idle_animation_time += delta_second * scale
            if self.idle_animation_time >= IDLE_FRAME_TIME:
                self.idle_animation_time = 0.0
                if self.idle_animation_state >= LAST_FRAME:
                    self.idle_animation_state = 0
                else:
                    self.idle_animation_state += 1
                if self.idle_animation_state < len(self.idle_images):
                    self.image = self.idle_images[self.idle_animation_state]

        elif self.state is VaillantState.WALK:
            self.walk_animation_time += delta_second * scale
            if self.walk_animation_time >= WALK_FRAME_TIME:
                self.walk_animation_time = 0.0
                if self.walk_animation_state >= LAST_FRAME:
                    self.walk_animation_state = 0
                else:
                    self.walk_animation_state += 1
                if self.walk_animation_state < len(self.walk_images):
                    self.image = self.walk_images[self.walk_animation_state]

            if self.velocity.x > 0.0:
                self.flip_flag = False
            if self.velocity.x < 0.0:
                self.flip_flag = True

    def movement(self, delta_second: float) -> None:
        """Steering is left to the random wander in ``update``."""
        super().movement(delta_second)

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Leave the scene when touched by the player."""
        super().on_hit_collision(hit_object)
        if hit_object.collision.object_type is ObjectType.PLAYER:
            self.destroy_object(self)

    def finalize(self) -> None:
        """Forget the animation handles."""
        super().finalize()
        self.idle_images.clear()
        self.walk_images.clear()