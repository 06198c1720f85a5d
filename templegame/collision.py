"""Collision shapes: a box for side checks and a capsule for hit tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .vector2d import Vector2D


class ObjectType(Enum):
    """What kind of thing a collision belongs to."""

    NONE = 0
    WALL = 1
    GROUND = 2
    ITEM = 3
    BUFF = 4
    PLAYER = 5
    PLAYER_ATTACK = 6
    ENEMY = 7
    ENEMY_ATTACK = 8


@dataclass
class Collision:
    """Collision data attached to a game object."""

    is_blocking: bool = False
    box_size: Vector2D = field(default_factory=Vector2D)
    pivot: Vector2D = field(default_factory=Vector2D)
    object_type: ObjectType = ObjectType.NONE
    hit_object_type: list[ObjectType] = field(default_factory=list)
    radius: float = 0.0
    position: Vector2D = field(default_factory=Vector2D)
    start_point: Vector2D = field(default_factory=Vector2D)
    end_point: Vector2D = field(default_factory=Vector2D)

    def set_size(self, width: float, height: float) -> None:
        """Set the box size."""
        self.box_size = Vector2D(width, height)

    def is_check_hit_target(self, object_type: ObjectType) -> bool:
        """Whether ``object_type`` is among the types this collision reacts to."""
        return object_type in self.hit_object_type

    def check_collision(self, other: Collision) -> bool:
        """Capsule test against ``other``; never hits a non-blocking collision."""
        if not other.is_blocking:
            return False

        u = self.end_point - self.start_point
        v = other.end_point - self.start_point
        w = self.start_point - other.start_point

        a = Vector2D.dot(u)
        b = Vector2D.dot(v)
        c = Vector2D.dot(v)
        d = Vector2D.dot(w)
        e = Vector2D.dot(w)

        denom = a * c - b * b
        if denom == 0.0:
            s = 0.0
        else:
            s = Vector2D.clamp((b * e - c * d) / denom, 0.0, 1.0)

        if c != 0.0:
            t = Vector2D.clamp((b * s + e) / c, 0.0, 1.0)
        else:
            t = 0.0

        closest_self = self.start_point + u * s
        closest_other = other.start_point + v * t
        dist = (closest_self - closest_other).length()
        return dist <= self.radius + other.radius