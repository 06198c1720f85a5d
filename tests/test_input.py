import pytest

from templegame.input import (
    BUTTON_A,
    BUTTON_B,
    KEY_A,
    KEY_SPACE,
    MOUSE_LEFT,
    MOUSE_RIGHT,
    RIGHT,
    LEFT,
    STICK_MAX,
    InputCtrl,
    KeyState,
    MousePoint,
    PadStick,
    get_input,
)


def test_key_lifecycle():
    ctrl = InputCtrl()
    ctrl.update(keys=[KEY_A])
    assert ctrl.get_key_state(KEY_A) is KeyState.PRESS
    ctrl.update(keys=[KEY_A])
    assert ctrl.get_key_state(KEY_A) is KeyState.PRESSED
    ctrl.update(keys=[KEY_A])
    assert ctrl.get_key_state(KEY_A) is KeyState.PRESSED
    ctrl.update(keys=[])
    assert ctrl.get_key_state(KEY_A) is KeyState.RELEASE
    ctrl.update(keys=[])
    assert ctrl.get_key_state(KEY_A) is KeyState.NONE


def test_key_pressed_again_right_after_release():
    ctrl = InputCtrl()
    ctrl.update(keys=[KEY_SPACE])
    ctrl.update(keys=[])
    ctrl.update(keys=[KEY_SPACE])
    assert ctrl.get_key_state(KEY_SPACE) is KeyState.PRESS


def test_untouched_key_is_none():
    ctrl = InputCtrl()
    ctrl.update(keys=[KEY_A])
    assert ctrl.get_key_state(KEY_SPACE) is KeyState.NONE


def test_button_lifecycle():
    ctrl = InputCtrl()
    ctrl.update(buttons=[BUTTON_A])
    assert ctrl.get_button_state(BUTTON_A) is KeyState.PRESS
    ctrl.update(buttons=[BUTTON_A])
    assert ctrl.get_button_state(BUTTON_A) is KeyState.PRESSED
    ctrl.update(buttons=[])
    assert ctrl.get_button_state(BUTTON_A) is KeyState.RELEASE
    ctrl.update(buttons=[])
    assert ctrl.get_button_state(BUTTON_A) is KeyState.NONE
    assert ctrl.get_button_state(BUTTON_B) is KeyState.NONE


def test_stick_state_selects_stick():
    ctrl = InputCtrl()
    ctrl.update(left_stick=(100.0, -200.0), right_stick=(300.0, 400.0))
    assert ctrl.get_stick_state(LEFT) == PadStick(100.0, -200.0)
    assert ctrl.get_stick_state(RIGHT) == PadStick(300.0, 400.0)


def test_stick_ratio_full_scale():
    ctrl = InputCtrl()
    ctrl.update(left_stick=(STICK_MAX, -STICK_MAX), right_stick=(0.0, 0.0))
    assert ctrl.get_stick_ratio(LEFT) == PadStick(1.0, -1.0)
    assert ctrl.get_stick_ratio(RIGHT) == PadStick(0.0, 0.0)


def test_stick_ratio_is_rounded_to_two_places():
    ctrl = InputCtrl()
    ctrl.update(left_stick=(12345.0, -5432.0))
    ratio = ctrl.get_stick_ratio(LEFT)
    assert ratio.x == pytest.approx(round(ratio.x, 2))
    assert ratio.y == pytest.approx(round(ratio.y, 2))
    assert abs(ratio.x - 12345.0 / STICK_MAX) <= 0.005


def test_mouse_buttons_and_cursor():
    ctrl = InputCtrl()
    ctrl.update(mouse_position=(12, 34), mouse_buttons=[MOUSE_LEFT])
    assert ctrl.get_mouse_cursor() == MousePoint(12, 34)
    assert ctrl.get_mouse_state(MOUSE_LEFT) is KeyState.PRESS
    assert ctrl.get_mouse_state(MOUSE_RIGHT) is KeyState.NONE
    ctrl.update(mouse_buttons=[MOUSE_LEFT])
    assert ctrl.get_mouse_state(MOUSE_LEFT) is KeyState.PRESSED
    ctrl.update(mouse_buttons=[])
    assert ctrl.get_mouse_state(MOUSE_LEFT) is KeyState.RELEASE


def test_shared_input_keeps_state_between_calls():
    get_input().update()
    get_input().update()
    try:
        get_input().update(keys=[KEY_A])
        assert get_input().get_key_state(KEY_A) is KeyState.PRESS
    finally:
        get_input().update()
        get_input().update()
    assert get_input().get_key_state(KEY_A) is KeyState.NONE