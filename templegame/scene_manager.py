"""Owns the window and the current scene and runs the main loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import pygame

from . import config
from .config import FrameTimer, get_fps_counter
from .debug_boss_scene import DebugBossScene
from .in_game_scene import InGameScene
from .input import get_input
from .resources import Canvas, ResourceError, ResourceManager
from .scene_base import SceneBase, SceneType
from .title_scene import TitleScene

APP_NAME = "Temple"
FPS_UPDATE_INTERVAL = 1000
DEBUG_FONT_SIZE = 16
WHITE = (255, 255, 255)

SceneFactory = Callable[[], SceneBase]

DEFAULT_SCENES: dict[SceneType, SceneFactory] = {
    SceneType.TITLE: TitleScene,
    SceneType.IN_GAME: InGameScene,
    SceneType.DEBUG_BOSS: DebugBossScene,
}


class SceneManager:
    """Creates scenes, drives them frame by frame and switches between them."""

    def __init__(
        self,
        canvas: Any = None,
        frame_timer: Any = None,
        fps_counter: Any = None,
        scene_factories: Mapping[SceneType, SceneFactory] | None = None,
    ) -> None:
        self.current_scene: SceneBase | None = None
        self.canvas = canvas
        self._frame_timer = frame_timer
        self.fps_counter = fps_counter if fps_counter is not None else get_fps_counter()
        self.scene_factories: dict[SceneType, SceneFactory] = dict(
            DEFAULT_SCENES if scene_factories is None else scene_factories
        )

    @property
    def frame_timer(self) -> Any:
        """The timer that measures the time between frames."""
        if self._frame_timer is None:
            self._frame_timer = FrameTimer()
        return self._frame_timer

    def wake_up(self) -> None:
        """Open the window and show the title scene."""
        try:
            pygame.init()
            screen = pygame.display.set_mode((config.WIN_MAX_X, config.WIN_MAX_Y))
        except pygame.error as exc:
            raise RuntimeError("failed to initialise the display") from exc
        pygame.display.set_caption(APP_NAME)
        self.canvas = Canvas(screen)
        self.change_scene(SceneType.TITLE)

    @staticmethod
    def _process_messages() -> bool:
        """Handle window events; False once the window is asked to close."""
        if not pygame.display.get_init():
            return True
        keep_running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keep_running = False
        return keep_running

    def _debug_controls(self) -> bool:
        """Handle the debug keys; True when the loop should stop."""
        if not pygame.display.get_init():
            return False
        pressed = pygame.key.get_pressed()
        if pressed[pygame.K_ESCAPE]:
            return True
        if pressed[pygame.K_f] and pressed[pygame.K_3]:
            self.fps_counter.set_limit_rate(30)
        if pressed[pygame.K_f] and pressed[pygame.K_6]:
            self.fps_counter.set_limit_rate(60)
        return False

    def run(self) -> None:
        """Run frames until the window closes or a scene asks to exit."""
        if self.current_scene is None:
            raise RuntimeError("no scene is active")

        self.fps_counter.set_limit_rate(config.FPS)
        self.fps_counter.set_update_interval(FPS_UPDATE_INTERVAL)
        timer = self.frame_timer

        while self._process_messages():
            if pygame.display.get_init() and pygame.display.get_active():
                get_input().update_from_pygame()

            self.fps_counter.limit()
            self.fps_counter.update()

            if config.DEBUG and self._debug_controls():
                break

            timer.tick()
            next_scene_type = self.current_scene.update(timer.delta_second())

            self.graph()

            if next_scene_type is SceneType.EXIT:
                break

            if self.current_scene.now_scene_type() is not next_scene_type:
                self.change_scene(next_scene_type)

    def shutdown(self) -> None:
        """Finalize the current scene, drop loaded resources and close the window."""
        if self.current_scene is not None:
            self.current_scene.finalize()
            self.current_scene = None
        ResourceManager.delete_instance()
        pygame.quit()

    def graph(self) -> None:
        """Draw the current scene and present the frame."""
        if self.current_scene is None or self.canvas is None:
            raise RuntimeError("nothing to draw on")
        self.canvas.clear()
        self.current_scene.draw(self.canvas)
        if config.DEBUG:
            self.canvas.set_font_size(DEBUG_FONT_SIZE)
            self.canvas.draw_text(10, 10, WHITE, f"FPS: {self.fps_counter.get():.0f}")
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def change_scene(self, next_type: SceneType) -> None:
        """Replace the current scene with a new, initialized one of ``next_type``."""
        next_scene = self.create_scene(next_type)
        if next_scene is None:
            raise RuntimeError(f"cannot switch to scene {next_type.name}")

        if self.current_scene is not None:
            self.current_scene.finalize()

        next_scene.initialize()
        self.current_scene = next_scene

    def create_scene(self, next_type: SceneType) -> SceneBase | None:
        """A new scene of ``next_type``, or None for types without a scene."""
        factory = self.scene_factories.get(next_type)
        return factory() if factory is not None else None


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns 0 on a clean exit and -1 on failure."""
    parser = argparse.ArgumentParser(prog="templegame", description="Play Temple.")
    parser.parse_args(argv)

    manager = SceneManager()
    result = 0
    try:
        manager.wake_up()
        manager.run()
        manager.shutdown()
    except (RuntimeError, ResourceError, OSError, pygame.error) as exc:
        print(exc, file=sys.stderr)
        result = -1
    finally:
        manager.shutdown()
    return result


if __name__ == "__main__":
    sys.exit(main())