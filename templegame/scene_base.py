"""Base class for scenes: owns objects, updates, collides and draws them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_right
from enum import Enum
from itertools import permutations
from typing import Any, TypeVar

from .game_object import GameObject, MobilityType
from .vector2d import Vector2D

_T = TypeVar("_T", bound=GameObject)


class SceneType(Enum):
    """The scenes the game can switch between."""

    TITLE = 0
    IN_GAME = 1
    RE_START = 2
    RESULT = 3
    EXIT = 4
    DEBUG_BOSS = 5


class SceneBase(ABC):
    """Holds the objects of a scene ordered by z layer."""

    def __init__(self) -> None:
        self._create_list: list[GameObject] = []
        self._object_list: list[GameObject] = []
        self._destroy_list: list[GameObject] = []
        self.screen_offset = Vector2D(0.0)

    def initialize(self) -> None:
        """Set the scene up before its first frame: the view starts unscrolled."""
        self.screen_offset = Vector2D(0.0)

    def update(self, delta_second: float) -> SceneType:
        """Add pending objects, update all, check collisions, remove destroyed."""
        for obj in self._create_list:
            index = bisect_right(
                self._object_list, obj.z_layer, key=lambda placed: placed.z_layer
            )
            self._object_list.insert(index, obj)
        self._create_list.clear()

        for obj in list(self._object_list):
            obj.update(delta_second)

        for target, partner in permutations(list(self._object_list), 2):
            if target.mobility is MobilityType.STATIONARY:
                continue
            self.check_collision(target, partner)

        for obj in self._destroy_list:
            if obj in self._object_list:
                self._object_list.remove(obj)
                obj.finalize()
        self._destroy_list.clear()

        return self.now_scene_type()

    def draw(self, canvas: Any) -> None:
        """Draw every object in z order."""
        for obj in self._object_list:
            obj.draw(canvas, self.screen_offset)

    def finalize(self) -> None:
        """Finalize and drop every object."""
        for obj in self._object_list:
            obj.finalize()
        self._object_list.clear()
        self._create_list.clear()
        self._destroy_list.clear()

    @abstractmethod
    def now_scene_type(self) -> SceneType:
        """The type of this scene."""

    def check_collision(self, target: GameObject, partner: GameObject) -> None:
        """Notify both objects when their collisions touch."""
        if target.collision.check_collision(partner.collision):
            target.on_hit_collision(partner)
            partner.on_hit_collision(target)

    def create_object(self, object_class: type[_T], location: Vector2D) -> _T:
        """Create, initialize and place an object; it joins the scene next update."""
        instance = object_class()
        if not isinstance(instance, GameObject):
            raise TypeError("failed to create object")
        instance.owner_scene = self
        instance.initialize()
        instance.location = location.copy()
        self._create_list.append(instance)
        return instance

    def destroy_object(self, target: GameObject | None) -> None:
        """Schedule ``target`` for removal at the end of the next update."""
        if target is None:
            return
        if any(obj is target for obj in self._destroy_list):
            return
        self._destroy_list.append(target)

    def objects(self) -> list[GameObject]:
        """The objects currently in the scene, in z order."""
        return list(self._object_list)