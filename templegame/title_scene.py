"""The title screen with a fade-out into the chosen scene."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygame

from .config import WIN_MAX_X, WIN_MAX_Y
from .input import BUTTON_A, BUTTON_B, KEY_1, KEY_RETURN, KeyState, get_input
from .resources import ResourceError, ResourceManager
from .scene_base import SceneBase, SceneType

TITLE_IMAGES = tuple(f"resource/images/title/j{i}.png" for i in range(1, 5))
FONT_PATH = "resource/fonts/PressStart2P-Regular.ttf"
DECISION_SOUND = "resource/sounds/decision_button.mp3"
DECISION_VOLUME = 250

FULL_ALPHA = 255.0
MISSING = -1

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
CYAN = (0, 255, 255)

_LOAD_ERRORS = (ResourceError, OSError, pygame.error)


def _load_graph(path: str) -> int:
    try:
        return ResourceManager.get_instance().get_images(path, 1, 1, 1, 0, 0)[0]
    except _LOAD_ERRORS:
        return MISSING


def _load_sound(path: str) -> int:
    try:
        return ResourceManager.get_instance().get_sounds(path)
    except _LOAD_ERRORS:
        return MISSING


class TitleScene(SceneBase):
    """Waits for a start button, then fades to black and switches scene."""

    def __init__(self) -> None:
        super().__init__()
        self.background_images: list[int] = []
        self.decision_sound = MISSING
        self.is_fading = False
        self.fade_alpha = 0.0
        self.next_scene = SceneType.TITLE

    def initialize(self) -> None:
        """Load backgrounds and the decision sound; the title font must exist."""
        self.background_images = [_load_graph(path) for path in TITLE_IMAGES]

        if not Path(FONT_PATH).is_file():
            raise ResourceError(f"{FONT_PATH} could not be loaded")

        self.decision_sound = _load_sound(DECISION_SOUND)
        if self.decision_sound != MISSING:
            ResourceManager.get_instance().sound(self.decision_sound).set_volume(
                DECISION_VOLUME / 255.0
            )

        super().initialize()

    def update(self, delta_second: float) -> SceneType:
        """Start or advance the fade; return the next scene once it is done."""
        controls = get_input()

        if self.is_fading:
            if (
                controls.get_key_state(KEY_RETURN) is KeyState.PRESS
                or controls.get_button_state(BUTTON_B)
            ):
                self.fade_alpha = FULL_ALPHA
                return self.next_scene

            self.fade_alpha += FULL_ALPHA * delta_second
            if self.fade_alpha >= FULL_ALPHA:
                self.fade_alpha = FULL_ALPHA
                return self.next_scene
        elif controls.get_key_state(KEY_RETURN) or controls.get_button_state(BUTTON_A):
            if self.decision_sound != MISSING:
                ResourceManager.get_instance().sound(self.decision_sound).play()
            self.is_fading = True
            self.fade_alpha = 0.0
            self.next_scene = SceneType.IN_GAME
        elif controls.get_key_state(KEY_1):
            self.is_fading = True
            self.next_scene = SceneType.DEBUG_BOSS

        return super().update(delta_second)

    def draw(self, canvas: Any) -> None:
        """Draw the layered background, the captions and the fade."""
        for handle in reversed(self.background_images):
            if handle != MISSING:
                canvas.draw_extend_graph(0, 0, WIN_MAX_X, WIN_MAX_Y, handle)

        canvas.set_font_size(65)
        canvas.draw_text(440, 150, WHITE, "Temple")
        canvas.draw_text(130, 500, WHITE, "Please A button")

        canvas.set_font_size(16)
        canvas.draw_text(10, 40, WHITE, "This is the Title.")
        canvas.draw_text(10, 60, WHITE, "Press Enter or A button: GameMain")

        if self.is_fading:
            canvas.fill_alpha(BLACK, int(self.fade_alpha))

        canvas.draw_text(1000, 10, WHITE, f"{self.fade_alpha:f}")
        canvas.draw_text(10, 100, CYAN, "Press Enter twice to skip")

    def finalize(self) -> None:
        """Drop the sound handle and the scene's objects."""
        self.decision_sound = MISSING
        super().finalize()

    def now_scene_type(self) -> SceneType:
        """This is the title scene."""
        return SceneType.TITLE