"""The player character: a state machine driven by keyboard and game-pad input."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .collision import ObjectType
from .game_object import WHITE, GameObject, MobilityType
from .input import (
    BUTTON_A,
    BUTTON_B,
    BUTTON_DPAD_DOWN,
    BUTTON_DPAD_LEFT,
    BUTTON_DPAD_RIGHT,
    BUTTON_DPAD_UP,
    BUTTON_X,
    KEY_A,
    KEY_D,
    KEY_E,
    KEY_LEFT,
    KEY_Q,
    KEY_RIGHT,
    KEY_S,
    KEY_SPACE,
    InputCtrl,
    KeyState,
    get_input,
)
from .resources import ResourceManager
from .vector2d import Vector2D

PLAYER_SPEED = 50.0
GRAVITY = 9.807

IDLE_ANIMATION_RATE = 0.1
MOVE_ANIMATION_RATE = 0.3
ROLL_ANIMATION_RATE = 0.01
JUMP_ANIMATION_RATE = 0.01
ATTACK_ANIMATION_RATE = 0.01

VELOCITY = 4.0
ADD_JUMP = 1
JUMP_VELOCITY = -4.0

MAX_HP = 100
DAMAGE_AMOUNT = 10

GROUND_LIMIT = 400.0
LEFT_LIMIT = 16.0
START_LOCATION = (100.0, 400.0)

IDLE_SHEET = "resource/images/player/idle/03_idle.png"
RUN_SHEET = "resource/images/player/run/run_288_45_8.png"
ATTACK_SHEET = "resource/images/player/attack1/atk_288_45.png"
JUMP_SHEET = "resource/images/player/jump_up/jump_up2.png"
ROLL_SHEET = "resource/images/player/roll/roll_288_45_7.png"


class PlayerState(Enum):
    """What the player is doing."""

    IDLE = 0
    MOVE = 1
    DIE = 2
    DAMAGE = 3
    JUMP = 4
    ATTACK = 5
    JUMP_ATTACK = 6
    AVOIDANCE = 7
    NONE = 8


def _is(state: KeyState, expected: KeyState) -> bool:
    return state is expected


class Player(GameObject):
    """The controllable hero."""

    _instance: Player | None = None

    def __init__(self) -> None:
        self._velocity = Vector2D(0.0)
        super().__init__()
        self.idle_animation: list[int] = []
        self.run_animation: list[int] = []
        self.attack_animation: list[int] = []
        self.jump_animation: list[int] = []
        self.avoidance_animation: list[int] = []
        self.jump_attack_flg = False
        self.player_state = PlayerState.IDLE
        self.animation_time = 0.0
        self.animation_count = 0
        self.scroll_end = False
        self.hp = MAX_HP
        self.is_power_up = False
        self.is_destroy = False
        self.is_on_ground = True
        self.scroll_offset = 0.0
        self.ground_y = GROUND_LIMIT
        self.g_velocity = 0

    @classmethod
    def get_instance(cls) -> Player:
        """The shared player, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def velocity(self) -> Vector2D:
        """Current movement per frame."""
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2D) -> None:
        self._velocity = value

    @property
    def power_up(self) -> bool:
        """Whether the player is powered up."""
        return self.is_power_up

    def set_power_down(self) -> None:
        """End the power-up."""
        self.is_power_up = False

    def set_scroll_end(self) -> None:
        """Mark that the stage can scroll no further."""
        self.scroll_end = True

    def initialize(self) -> None:
        """Load the animations and set up collision, layer and start position."""
        resources = ResourceManager.get_instance()
        self.idle_animation = resources.get_images(IDLE_SHEET, 8, 8, 1, 288, 45)
        self.run_animation = resources.get_images(RUN_SHEET, 8, 8, 1, 288, 45)
        self.attack_animation = resources.get_images(ATTACK_SHEET, 6, 6, 1, 288, 45)
        self.jump_animation = resources.get_images(JUMP_SHEET, 7, 7, 1, 288, 60)
        self.avoidance_animation = resources.get_images(ROLL_SHEET, 7, 7, 1, 288, 45)

        self.collision.is_blocking = True
        self.collision.object_type = ObjectType.PLAYER
        self.collision.hit_object_type = [ObjectType.ENEMY, ObjectType.GROUND]

        self.draw_collision_box = True
        self.draw_collision_capsule = True

        self.img_size = Vector2D(100, 100)
        self.collision.radius = 25
        self.z_layer = 5
        self.mobility = MobilityType.MOVABLE

        self.is_on_ground = True
        self.scroll_offset = 0.0
        self.ground_y = GROUND_LIMIT

        self.location = Vector2D(*START_LOCATION)
        self.image = self.idle_animation[0]

    def update(self, delta_second: float) -> None:
        """Apply gravity, run the current state and move."""
        controls = get_input()

        self.velocity.y += GRAVITY * delta_second * ADD_JUMP

        if self.location.y > GROUND_LIMIT:
            self.location.y = GROUND_LIMIT
            self.velocity.y = 0.5

        if (
            self.collision.object_type is ObjectType.ENEMY
            and self.player_state is not PlayerState.AVOIDANCE
        ):
            self.player_state = PlayerState.DAMAGE

        handlers: dict[PlayerState, Callable[[InputCtrl, float], None]] = {
            PlayerState.IDLE: self._idle,
            PlayerState.MOVE: self._move,
            PlayerState.DIE: self._die,
            PlayerState.DAMAGE: self._damage,
            PlayerState.JUMP: self._jump,
            PlayerState.ATTACK: self._attack,
            PlayerState.JUMP_ATTACK: self._jump_attack,
            PlayerState.AVOIDANCE: self._avoidance,
        }
        handler = handlers.get(self.player_state)
        if handler is not None:
            handler(controls, delta_second)

        if self.location.x < LEFT_LIMIT:
            self.location.x = LEFT_LIMIT

        self.location += self.velocity

        half_height = self.img_size.y / 2.0
        self.collision.position = self.location.copy()
        self.collision.start_point = Vector2D(self.location.x, self.location.y - half_height)
        self.collision.end_point = Vector2D(self.location.x, self.location.y + half_height)

    def _idle(self, controls: InputCtrl, delta_second: float) -> None:
        self._animation_control(
            self.idle_animation, IDLE_ANIMATION_RATE, delta_second, 8, PlayerState.IDLE
        )
        self.velocity.x = 0.0

        key = controls.get_key_state
        button = controls.get_button_state
        held = KeyState.PRESSED
        press = KeyState.PRESS

        if (
            any(_is(key(k), held) for k in (KEY_A, KEY_D, KEY_LEFT, KEY_RIGHT))
            or any(_is(button(b), held) for b in (BUTTON_DPAD_LEFT, BUTTON_DPAD_RIGHT))
        ):
            self.player_state = PlayerState.MOVE
        elif (_is(key(KEY_SPACE), press) or _is(button(BUTTON_A), press)) and self.is_on_ground:
            self.player_state = PlayerState.JUMP
        elif _is(key(KEY_E), press) or _is(button(BUTTON_X), press):
            self.player_state = PlayerState.ATTACK
        elif _is(key(KEY_Q), press) or _is(button(BUTTON_B), press):
            self.player_state = PlayerState.AVOIDANCE
        elif _is(key(KEY_S), press):
            self.player_state = PlayerState.DAMAGE

    def _move(self, controls: InputCtrl, delta_second: float) -> None:
        if _is(controls.get_key_state(KEY_E), KeyState.PRESS) or _is(
            controls.get_button_state(BUTTON_X), KeyState.PRESS
        ):
            self.player_state = PlayerState.ATTACK

        self._movement(controls)
        self._animation_control(
            self.run_animation, MOVE_ANIMATION_RATE, delta_second, 8, PlayerState.IDLE
        )

    def _die(self, controls: InputCtrl, delta_second: float) -> None:
        self.is_destroy = True

    def _damage(self, controls: InputCtrl, delta_second: float) -> None:
        self.hp -= DAMAGE_AMOUNT
        self.player_state = PlayerState.IDLE
        if self.hp == 0:
            self.player_state = PlayerState.DIE

    def _jump(self, controls: InputCtrl, delta_second: float) -> None:
        self._jump_movement(controls)

        attack_pressed = _is(controls.get_key_state(KEY_E), KeyState.PRESS) or _is(
            controls.get_button_state(BUTTON_X), KeyState.PRESS
        )
        if attack_pressed and not self.jump_attack_flg:
            self.player_state = PlayerState.JUMP_ATTACK

        if self.location.y + self.velocity.y * delta_second > self.ground_y:
            self.location.y = self.ground_y
            self.velocity.y = 0.0
            self.g_velocity = 0
            self.is_on_ground = True
            self.jump_attack_flg = False
            self.player_state = PlayerState.IDLE

    def _attack(self, controls: InputCtrl, delta_second: float) -> None:
        self._animation_control(
            self.attack_animation, ATTACK_ANIMATION_RATE, delta_second, 6, PlayerState.IDLE
        )

    def _jump_attack(self, controls: InputCtrl, delta_second: float) -> None:
        self._animation_control(
            self.attack_animation, ATTACK_ANIMATION_RATE, delta_second, 6, PlayerState.JUMP
        )

    def _avoidance(self, controls: InputCtrl, delta_second: float) -> None:
        self._animation_control(
            self.avoidance_animation, ROLL_ANIMATION_RATE, delta_second, 7, PlayerState.IDLE
        )

    def _movement(self, controls: InputCtrl) -> None:
        key = controls.get_key_state
        button = controls.get_button_state
        press = KeyState.PRESS

        if key(KEY_A) or key(KEY_LEFT) or button(BUTTON_DPAD_LEFT):
            self.velocity.x = -VELOCITY
            self.flip_flag = True
            if (_is(key(KEY_SPACE), press) or _is(button(BUTTON_A), press)) and self.is_on_ground:
                self.player_state = PlayerState.JUMP
            if _is(key(KEY_E), press) or _is(button(BUTTON_X), press):
                self.player_state = PlayerState.ATTACK
        elif key(KEY_D) or key(KEY_RIGHT) or button(BUTTON_DPAD_RIGHT):
            self.velocity.x = VELOCITY
            self.flip_flag = False
            if _is(key(KEY_SPACE), press) or _is(button(BUTTON_A), press):
                self.player_state = PlayerState.JUMP
        else:
            self.velocity.x = 0.0
            self.player_state = PlayerState.IDLE

    def _jump_movement(self, controls: InputCtrl) -> None:
        pad_button = BUTTON_DPAD_DOWN if self.is_on_ground else BUTTON_DPAD_UP
        if (controls.get_key_state(KEY_SPACE) and self.is_on_ground) or controls.get_button_state(
            pad_button
        ):
            self.is_on_ground = False
            self.velocity.y = JUMP_VELOCITY

    def _animation_control(
        self,
        images: list[int],
        frame: float,
        delta_second: float,
        image_count: int,
        state: PlayerState,
    ) -> None:
        self.animation_time += delta_second
        if self.animation_time < frame:
            return

        self.animation_time = 0.0
        self.animation_count += 1
        if self.animation_count >= image_count:
            self.animation_count = 0
            if state is PlayerState.JUMP and not self.jump_attack_flg:
                self.jump_attack_flg = True
            self.player_state = state

        if self.animation_count < len(images):
            self.image = images[self.animation_count]

    def draw(self, canvas: Any, screen_offset: Vector2D) -> None:
        """Draw the hit points, height readout and the player."""
        canvas.draw_text(0, 180, WHITE, f"Player HP: {self.hp}")
        canvas.draw_text(0, 120, WHITE, f"Player location.y: {self.location.y:.0f}")
        super().draw(canvas, screen_offset)

    def finalize(self) -> None:
        """Forget the animation handles."""
        self.idle_animation.clear()
        self.attack_animation.clear()
        self.run_animation.clear()
        self.jump_animation.clear()
        self.avoidance_animation.clear()

    def on_hit_collision(self, hit_object: GameObject) -> None:
        """Take damage when touching an enemy."""
        if hit_object.collision.object_type is ObjectType.ENEMY:
            self.player_state = PlayerState.DAMAGE