"""Base class for everything that lives in a scene."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .collision import Collision
from .vector2d import Vector2D

if TYPE_CHECKING:
    from .scene_base import SceneBase

OBJECT_SIZE = 32.0
WHITE = (255, 255, 255)


class MobilityType(Enum):
    """Whether an object moves and so takes part in collision checks."""

    STATIONARY = 0
    MOVABLE = 1


class CollisionSide(Enum):
    """Side of a box overlap."""

    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


class ObjectKind(Enum):
    """Broad category of a game object."""

    PLAYER = 0
    ENEMY = 1
    OTHER = 2


class GameObject:
    """An object with a location, an image and a collision shape."""

    def __init__(self) -> None:
        self.owner_scene: SceneBase | None = None
        self.location = Vector2D(0.0)
        self.velocity = Vector2D(0.0)
        self.image = 0
        self.z_layer = 0
        self.mobility = MobilityType.STATIONARY
        self.kind = ObjectKind.OTHER
        self.flip_flag = False
        self.draw_collision_box = False
        self.draw_collision_circle = False
        self.draw_collision_capsule = False
        self.collision = Collision()
        self.img_size = Vector2D(0.0)

    def initialize(self) -> None:
        """Called once when the object is created by a scene."""

    def update(self, delta_second: float) -> None:
        """Advance the object by one frame."""

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw the image centred on the location, then the collision outlines."""
        graph_location = self.location + screen_offset
        canvas.draw_rota_graph(
            graph_location.x, graph_location.y, 1.0, 0.0, self.image, self.flip_flag
        )
        self.draw_collision(canvas, screen_offset)

    def draw_collision(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw whichever collision outlines are switched on."""
        collision = self.collision
        if self.draw_collision_box:
            box_min, box_max = self._box_bounds()
            box_min += screen_offset
            box_max += screen_offset
            canvas.draw_box(box_min.x, box_min.y, box_max.x, box_max.y, WHITE, False)

        if self.draw_collision_circle:
            canvas.draw_circle(
                collision.position.x, collision.position.y, collision.radius, WHITE, False
            )

        if self.draw_collision_capsule:
            start, end, radius = collision.start_point, collision.end_point, collision.radius
            canvas.draw_box(start.x - radius, start.y, end.x + radius, end.y, WHITE, False)
            canvas.draw_circle(start.x, start.y, radius, WHITE, False)
            canvas.draw_circle(end.x, end.y, radius, WHITE, False)
            canvas.draw_line(start.x, start.y, end.x, end.y, WHITE)

    def finalize(self) -> None:
        """Called once when the object is removed from its scene."""

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """React to touching another object; the base only checks the argument."""
        if not isinstance(hit_object, GameObject):
            raise TypeError("hit object must be a GameObject")

    def _box_bounds(self) -> tuple[Vector2D, Vector2D]:
        collision = self.collision
        half = collision.box_size / 2
        box_min = collision.position - half + collision.pivot
        box_max = collision.position + half + collision.pivot
        return box_min, box_max

    def collision_side(self, other: GameObject) -> CollisionSide:
        """Which side the boxes of this object and ``other`` overlap on."""
        this_min, this_max = self._box_bounds()
        other_min, other_max = other._box_bounds()

        left_overlap = other_max.x - this_min.x
        right_overlap = this_max.x - other_min.x
        top_overlap = other_max.y - this_min.y
        bottom_overlap = this_max.y - other_min.y

        if min(left_overlap, right_overlap, top_overlap, bottom_overlap) <= 0.0:
            return CollisionSide.NONE

        if (
            top_overlap < bottom_overlap
            and top_overlap < left_overlap
            and top_overlap < right_overlap
        ):
            return CollisionSide.BOTTOM
        if (
            bottom_overlap < top_overlap
            and bottom_overlap < left_overlap
            and bottom_overlap < right_overlap
        ):
            return CollisionSide.TOP
        if left_overlap < right_overlap:
            return CollisionSide.RIGHT
        return CollisionSide.LEFT

    def _scene(self) -> SceneBase:
        if self.owner_scene is None:
            raise RuntimeError("object has no owner scene")
        return self.owner_scene

    def create_object(self, object_class: type, location: Vector2D) -> Any:
        """Create an object of ``object_class`` in the owner scene."""
        return self._scene().create_object(object_class, location)

    def destroy_object(self, target: GameObject | None) -> None:
        """Ask the owner scene to remove ``target``."""
        self._scene().destroy_object(target)

    def screen_offset(self) -> Vector2D:
        """The owner scene's screen offset."""
        return self._scene().screen_offset.copy()