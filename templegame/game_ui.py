"""Heads-up display: hit points, portrait, timer, buffs and the dodge button."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

from .resources import ResourceError, ResourceManager

WHITE = (255, 255, 255)

UI_IMAGES = {
    "hp_bar": "resource/images/ui/hp_bar_backA.png",
    "hp_frame": "resource/images/ui/hp_frameA.png",
    "player_icon": "resource/images/ui/character_icon.png",
    "player_frame": "resource/images/ui/character_frame.png",
    "time_frame": "resource/images/ui/timer_frame.png",
    "buf_attack": "resource/images/ui/buf_icons/buf_attack_power_up.png",
    "attack_frame": "resource/images/ui/buf_frames/frame_attack_power.png",
    "buf_defense": "resource/images/ui/buf_icons/buf_Defense_power_up.png",
    "defense_frame": "resource/images/ui/buf_frames/frame_Defense_power.png",
    "buf_hp_up": "resource/images/ui/buf_icons/buf_hp_upper_limit_up.png",
    "hp_up_frame": "resource/images/ui/buf_frames/frame_hp_upper_limit.png",
    "buf_recovery": "resource/images/ui/buf_icons/buf_hp_recovery.png",
    "recovery_frame": "resource/images/ui/buf_frames/frame_hp_recovery.png",
    "buf_movement": "resource/images/ui/buf_icons/buf_movement_speed_up.png",
    "movement_frame": "resource/images/ui/buf_frames/frame_movement_speed.png",
    "avoidance_button": "resource/images/ui/button/short_button_animation1.png",
}

BUFFS = (
    ("attack_frame", "buf_attack"),
    ("defense_frame", "buf_defense"),
    ("hp_up_frame", "buf_hp_up"),
    ("recovery_frame", "buf_recovery"),
    ("movement_frame", "buf_movement"),
)

BUFF_FRAME_SIZE = 32
BUFF_PADDING = 170
BUFF_START_X = 460
BUFF_Y = 74
BUFF_SCALE = 1.5

MISSING = -1


def _load_graph(path: str) -> int:
    """Load a single image, or return ``MISSING`` when it cannot be read."""
    try:
        return ResourceManager.get_instance().get_images(path, 1, 1, 1, 0, 0)[0]
    except (ResourceError, OSError, pygame.error):
        return MISSING


class GameUI:
    """Draws the in-game overlay."""

    _instance: GameUI | None = None

    def __init__(self, loader: Callable[[str], int] | None = None) -> None:
        self._loader = loader or _load_graph
        self.handles: dict[str, int] = {name: MISSING for name in UI_IMAGES}
        self.frames = 0

    @classmethod
    def get_instance(cls) -> GameUI:
        """The shared overlay, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self) -> None:
        """Load every overlay image."""
        self.handles = {name: self._loader(path) for name, path in UI_IMAGES.items()}
        self.frames = 0

    def update(self) -> None:
        """Count the frames the overlay has been shown for."""
        self.frames += 1

    def _draw(self, canvas: Any, x: float, y: float, scale: float, name: str) -> None:
        handle = self.handles[name]
        if handle != MISSING:
            canvas.draw_rota_graph(x, y, scale, 0.0, handle, False)

    def draw(self, canvas: Any) -> None:
        """Draw the overlay on top of the scene."""
        self._draw(canvas, 255, 30, 1.0, "hp_frame")
        self._draw(canvas, 251, 30, 0.9, "hp_bar")

        self._draw(canvas, 72, 75, 5.5, "player_frame")
        self._draw(canvas, 72, 70, 1.8, "player_icon")

        self._draw(canvas, 240, 74, 5.0, "time_frame")
        canvas.draw_text(155, 74, WHITE, "00:00")

        x = BUFF_START_X + BUFF_FRAME_SIZE // 2
        for frame, icon in BUFFS:
            self._draw(canvas, x, BUFF_Y, BUFF_SCALE, frame)
            self._draw(canvas, x, BUFF_Y, BUFF_SCALE, icon)
            x += BUFF_PADDING

        self._draw(canvas, 1150, 650, 3.5, "avoidance_button")

    def finalize(self) -> None:
        """Drop the image handles; the resource manager owns the images."""
        self.handles = {name: MISSING for name in UI_IMAGES}
        self.frames = 0