"""Keyboard, game-pad and mouse state tracked frame by frame."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

import pygame

PAD_BUTTONS = 16
STICK_MAX = 32767.0

LEFT = 0
RIGHT = 1

BUTTON_DPAD_UP = 0
BUTTON_DPAD_DOWN = 1
BUTTON_DPAD_LEFT = 2
BUTTON_DPAD_RIGHT = 3
BUTTON_START = 4
BUTTON_BACK = 5
BUTTON_LEFT_THUMB = 6
BUTTON_RIGHT_THUMB = 7
BUTTON_LEFT_SHOULDER = 8
BUTTON_RIGHT_SHOULDER = 9
BUTTON_A = 12
BUTTON_B = 13
BUTTON_X = 14
BUTTON_Y = 15

MOUSE_LEFT = 0
MOUSE_RIGHT = 1

KEY_A = pygame.K_a
KEY_D = pygame.K_d
KEY_E = pygame.K_e
KEY_F = pygame.K_f
KEY_Q = pygame.K_q
KEY_S = pygame.K_s
KEY_0 = pygame.K_0
KEY_1 = pygame.K_1
KEY_3 = pygame.K_3
KEY_6 = pygame.K_6
KEY_LEFT = pygame.K_LEFT
KEY_RIGHT = pygame.K_RIGHT
KEY_SPACE = pygame.K_SPACE
KEY_RETURN = pygame.K_RETURN
KEY_ESCAPE = pygame.K_ESCAPE

_WATCHED_KEYS = (
    KEY_A, KEY_D, KEY_E, KEY_F, KEY_Q, KEY_S, KEY_0, KEY_1, KEY_3, KEY_6,
    KEY_LEFT, KEY_RIGHT, KEY_SPACE, KEY_RETURN, KEY_ESCAPE,
)

_JOYSTICK_BUTTONS = {
    0: BUTTON_A,
    1: BUTTON_B,
    2: BUTTON_X,
    3: BUTTON_Y,
    4: BUTTON_LEFT_SHOULDER,
    5: BUTTON_RIGHT_SHOULDER,
    6: BUTTON_BACK,
    7: BUTTON_START,
    8: BUTTON_LEFT_THUMB,
    9: BUTTON_RIGHT_THUMB,
}


class KeyState(IntEnum):
    """State of a key or button in the current frame."""

    NONE = 0
    PRESS = 1
    PRESSED = 2
    RELEASE = 3


@dataclass
class PadStick:
    """Stick deflection on both axes."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class MousePoint:
    """Mouse cursor position."""

    x: int = 0
    y: int = 0


def _round_half_away(value: float) -> float:
    rounded = int(abs(value) + 0.5)
    return float(rounded if value >= 0 else -rounded)


def _transition(now: int, old: int) -> KeyState:
    if now == 1 and old == 0:
        return KeyState.PRESS
    if now == 1:
        return KeyState.PRESSED
    if old == 1:
        return KeyState.RELEASE
    return KeyState.NONE


class InputCtrl:
    """Holds this frame's and last frame's input."""

    def __init__(self) -> None:
        self._now_buttons: set[int] = set()
        self._old_buttons: set[int] = set()
        self._left_stick = PadStick()
        self._right_stick = PadStick()
        self._key_counts: dict[int, int] = {}
        self._mouse_point = MousePoint()
        self._now_mouse = [0, 0]
        self._old_mouse = [0, 0]
        self._joystick = None

    def update(
        self,
        keys: Iterable[int] = (),
        buttons: Iterable[int] = (),
        left_stick: tuple[float, float] = (0.0, 0.0),
        right_stick: tuple[float, float] = (0.0, 0.0),
        mouse_position: tuple[int, int] = (0, 0),
        mouse_buttons: Iterable[int] = (),
    ) -> None:
        """Advance one frame with the given held keys, buttons, sticks and mouse."""
        self._old_buttons = self._now_buttons
        self._now_buttons = set(buttons)

        self._left_stick = PadStick(*left_stick)
        self._right_stick = PadStick(*right_stick)

        pressed = set(keys)
        counts = {
            key: -1
            for key, count in self._key_counts.items()
            if count >= 1 and key not in pressed
        }
        for key in pressed:
            previous = self._key_counts.get(key, 0)
            counts[key] = previous + 1 if previous >= 1 else 1
        self._key_counts = counts

        self._mouse_point = MousePoint(int(mouse_position[0]), int(mouse_position[1]))
        held_mouse = set(mouse_buttons)
        self._old_mouse = self._now_mouse
        self._now_mouse = [1 if i in held_mouse else 0 for i in (MOUSE_LEFT, MOUSE_RIGHT)]

    def update_from_pygame(self) -> None:
        """Advance one frame reading the devices through pygame."""
        pressed = pygame.key.get_pressed()
        keys = [key for key in _WATCHED_KEYS if pressed[key]]

        buttons: set[int] = set()
        left_stick = (0.0, 0.0)
        right_stick = (0.0, 0.0)
        joystick = self._current_joystick()
        if joystick is not None:
            for index, button in _JOYSTICK_BUTTONS.items():
                if index < joystick.get_numbuttons() and joystick.get_button(index):
                    buttons.add(button)
            if joystick.get_numhats():
                hat_x, hat_y = joystick.get_hat(0)
                if hat_x < 0:
                    buttons.add(BUTTON_DPAD_LEFT)
                elif hat_x > 0:
                    buttons.add(BUTTON_DPAD_RIGHT)
                if hat_y > 0:
                    buttons.add(BUTTON_DPAD_UP)
                elif hat_y < 0:
                    buttons.add(BUTTON_DPAD_DOWN)

            def axis(index: int) -> float:
                return joystick.get_axis(index) if index < joystick.get_numaxes() else 0.0

            left_stick = (axis(0) * STICK_MAX, -axis(1) * STICK_MAX)
            right_stick = (axis(2) * STICK_MAX, -axis(3) * STICK_MAX)

        left, _middle, right = pygame.mouse.get_pressed()[:3]
        mouse_buttons = [b for b, held in ((MOUSE_LEFT, left), (MOUSE_RIGHT, right)) if held]

        self.update(
            keys=keys,
            buttons=buttons,
            left_stick=left_stick,
            right_stick=right_stick,
            mouse_position=pygame.mouse.get_pos(),
            mouse_buttons=mouse_buttons,
        )

    def _current_joystick(self):
        if not pygame.joystick.get_init():
            pygame.joystick.init()
        if pygame.joystick.get_count() == 0:
            self._joystick = None
            return None
        if self._joystick is None:
            self._joystick = pygame.joystick.Joystick(0)
        return self._joystick

    def get_button_state(self, button: int) -> KeyState:
        """State of a game-pad button."""
        now = 1 if button in self._now_buttons else 0
        old = 1 if button in self._old_buttons else 0
        return _transition(now, old)

    def get_stick_state(self, stick: int) -> PadStick:
        """Raw deflection of the left (0) or right (non-zero) stick."""
        source = self._right_stick if stick else self._left_stick
        return PadStick(source.x, source.y)

    def get_stick_ratio(self, stick: int) -> PadStick:
        """Deflection as a fraction of full scale, rounded to two places."""
        source = self._right_stick if stick else self._left_stick
        return PadStick(
            _round_half_away(source.x / STICK_MAX * 100.0) / 100.0,
            _round_half_away(source.y / STICK_MAX * 100.0) / 100.0,
        )

    def get_key_state(self, key: int) -> KeyState:
        """State of a keyboard key."""
        count = self._key_counts.get(key, 0)
        if count == 1:
            return KeyState.PRESS
        if count >= 1:
            return KeyState.PRESSED
        if count <= -1:
            return KeyState.RELEASE
        return KeyState.NONE

    def get_mouse_state(self, button: int) -> KeyState:
        """State of the left (0) or right (1) mouse button."""
        return _transition(self._now_mouse[button], self._old_mouse[button])

    def get_mouse_cursor(self) -> MousePoint:
        """Mouse cursor position."""
        return MousePoint(self._mouse_point.x, self._mouse_point.y)


_INPUT = InputCtrl()


def get_input() -> InputCtrl:
    """The shared input controller."""
    return _INPUT