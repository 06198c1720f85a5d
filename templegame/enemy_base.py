"""Shared behaviour of ordinary enemies: patrol, animation, damage."""

from __future__ import annotations

from enum import Enum
from typing import Any

from . import config
from .collision import ObjectType
from .game_object import CollisionSide, GameObject
from .input import KEY_0, KEY_1, KEY_E, KeyState, get_input
from .vector2d import Vector2D

IMG_CHANGE_TIME = 0.05
MOVE_SPEED = 1.0
FALLING_SPEED = 4.0

HP_X_MAXSIZE = 50
HP_Y_SIZE = 10

DAMAGE_STOP_TIME = 0.1

HP_COLOR = (255, 0, 0)


class EnemyState(Enum):
    """What an enemy is doing."""

    NONE = 0
    IDLE = 1
    ATTACK_POSITION = 2
    ATTACK = 3
    GET_ATTACK = 4
    DIE = 5


class EnemyBase(GameObject):
    """Base for enemies; subclasses supply images and call the helpers."""

    def __init__(self) -> None:
        super().__init__()
        self.hp = 100.0
        self.max_hp = 100.0
        self.now_state = EnemyState.IDLE
        self.old_state = EnemyState.NONE
        self.now_state_time = 0.0
        self.player_location = Vector2D(0.0)
        self.player_velocity = Vector2D(0.0)
        self.player_found_flg = False
        self.idle_img: list[int] = []
        self.attack_position_img: list[int] = []
        self.attack_img: list[int] = []
        self.get_attack_img: list[int] = []
        self.die_img: list[int] = []
        self.now_image_num = 0
        self.spawn_position = Vector2D(0.0)
        self.init_update_flg = False
        self.damage_stop_ct = 0.0
        self.damage_stop_flg = False

    def initialize(self) -> None:
        """Make the enemy block and react to players, enemies and ground."""
        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.ENEMY
        self.collision.hit_object_type = [ObjectType.PLAYER, ObjectType.ENEMY, ObjectType.GROUND]

    def update(self, delta_second: float) -> None:
        """Run first-frame setup, tick damage cooldown, move and sync the capsule."""
        if not self.init_update_flg:
            self.init_update()
            self.init_update_flg = True

        self.collision.position = self.location.copy()

        if config.DEBUG:
            controls = get_input()
            if controls.get_key_state(KEY_E) is KeyState.PRESSED:
                if controls.get_key_state(KEY_0) is KeyState.PRESSED:
                    self.hp = 0.0
                if controls.get_key_state(KEY_1) is KeyState.PRESSED:
                    self.take_damage(10)

        if self.damage_stop_flg:
            self.damage_stop_ct += delta_second
            if self.damage_stop_ct >= DAMAGE_STOP_TIME:
                self.damage_stop_flg = False
                self.damage_stop_ct = 0.0

        self.location += self.velocity

        self.collision.position = self.location.copy()
        self.collision.start_point = Vector2D(self.location.x, self.location.y - self.img_size.y)
        self.collision.end_point = Vector2D(self.location.x, self.location.y + self.img_size.y)

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw the enemy, plus its hit-point bar in debug builds."""
        super().draw(canvas, screen_offset)
        if config.DEBUG:
            self.draw_hp(canvas)

    def finalize(self) -> None:
        """Release nothing by default."""

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Get knocked back when touching the player."""
        if hit_object.collision.object_type is ObjectType.PLAYER:
            self.get_damage_movement(hit_object)

    def add_velocity(self, v: Vector2D) -> None:
        """Scroll the enemy and its patrol origin back by ``v``."""
        self.location -= v
        self.spawn_position -= v

    def _state_images(self) -> dict[EnemyState, list[int]]:
        return {
            EnemyState.IDLE: self.idle_img,
            EnemyState.ATTACK_POSITION: self.attack_position_img,
            EnemyState.ATTACK: self.attack_img,
            EnemyState.GET_ATTACK: self.get_attack_img,
            EnemyState.DIE: self.die_img,
        }

    def animation(self, delta_second: float) -> None:
        """Step through the images of the current state."""
        images = self._state_images().get(self.now_state)
        if images is None:
            return

        if self.now_state is not self.old_state:
            self.now_state_time = 0.0
            self.now_image_num = 0

        self.now_state_time += delta_second
        self.set_enemy_state(self.now_state)

        if self.now_image_num >= len(images):
            self.now_image_num = 0

        if self.now_state_time >= IMG_CHANGE_TIME and images:
            self.image = images[self.now_image_num]
            self.now_state_time = 0.0
            self.now_image_num += 1

    def set_enemy_state(self, state: EnemyState) -> None:
        """Switch state, remembering the previous one."""
        self.old_state = self.now_state
        self.now_state = state

    def movement(self, distance: float) -> None:
        """Patrol left from the spawn point up to ``distance``, then back."""
        if self.spawn_position.x <= self.location.x:
            self.velocity.x = -MOVE_SPEED
            self.flip_flag = True
        if self.spawn_position.x - distance >= self.location.x:
            self.velocity.x = MOVE_SPEED
            self.flip_flag = False

    def init_update(self) -> None:
        """Record the spawn point on the first update."""
        self.spawn_position = self.location.copy()

    def get_damage_movement(self, hit_object: GameObject) -> None:
        """Knock-back after being hit."""
        self.velocity = Vector2D(2.0, 1.0)

    def hit_enemy_movement(self, hit_object: GameObject) -> None:
        """Bounce away sideways from another enemy."""
        side = self.collision_side(hit_object)
        if side is CollisionSide.LEFT:
            self.velocity = Vector2D(2.0, 1.0)
        elif side is CollisionSide.RIGHT:
            self.velocity = Vector2D(-2.0, 1.0)

    def player_set_location(self, location: Vector2D) -> None:
        """Remember where the player is."""
        self.player_location = location.copy()

    def player_set_velocity(self, velocity: Vector2D) -> None:
        """Remember how the player is moving."""
        self.player_velocity = velocity.copy()

    def draw_hp(self, canvas: Any) -> None:
        """Draw a red bar sized by the remaining hit points."""
        hp_x_size = HP_X_MAXSIZE * (self.hp / self.max_hp)
        left = self.location.x - self.img_size.x - (HP_X_MAXSIZE // 3)
        top = self.location.y - self.img_size.y - self.collision.radius
        canvas.draw_box(left, top, left + hp_x_size, top - HP_Y_SIZE, HP_COLOR, True)

    def take_damage(self, damage: float) -> None:
        """Lose ``damage`` hit points unless still in the post-hit cooldown."""
        if not self.damage_stop_flg:
            self.hp -= damage
            self.damage_stop_flg = True
        if self.hp <= 0:
            self.hp = 0.0