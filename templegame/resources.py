"""Cached loading of images and sounds addressed by integer handles, and drawing."""

from __future__ import annotations

import itertools
import math
import os
from collections.abc import Callable
from typing import Any

import pygame


class ResourceError(Exception):
    """A resource could not be loaded or found."""


def _load_image(path: str) -> pygame.Surface:
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"failed to load {path}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _load_sound(path: str) -> Any:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"failed to load {path}") from exc


class ResourceManager:
    """Loads each file once and hands out integer handles for it."""

    _instance: ResourceManager | None = None

    def __init__(
        self,
        image_loader: Callable[[str], Any] | None = None,
        sound_loader: Callable[[str], Any] | None = None,
    ) -> None:
        self._image_loader = image_loader or _load_image
        self._sound_loader = sound_loader or _load_sound
        self._images_container: dict[str, list[int]] = {}
        self._sounds_container: dict[str, int] = {}
        self._surfaces: dict[int, Any] = {}
        self._sounds: dict[int, Any] = {}
        self._handles = itertools.count(1)

    @classmethod
    def get_instance(cls) -> ResourceManager:
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Unload everything and drop the shared manager."""
        if cls._instance is not None:
            cls._instance.unload_images()
            cls._instance.unload_sounds()
            cls._instance = None

    def _load(self, loader: Callable[[str], Any], path: str) -> Any:
        try:
            return loader(path)
        except ResourceError:
            raise
        except (pygame.error, OSError, ValueError) as exc:
            raise ResourceError(f"failed to load {path}") from exc

    def get_images(
        self,
        file_name: str | os.PathLike[str],
        all_num: int = 1,
        num_x: int = 1,
        num_y: int = 1,
        size_x: int = 0,
        size_y: int = 0,
    ) -> list[int]:
        """Handles for an image, or for ``all_num`` cells of a sprite sheet."""
        path = os.fspath(file_name)
        if path not in self._images_container:
            if all_num == 1:
                surfaces = [self._load(self._image_loader, path)]
            else:
                surfaces = self._divide(path, all_num, num_x, num_y, size_x, size_y)
            handles = []
            for surface in surfaces:
                handle = next(self._handles)
                self._surfaces[handle] = surface
                handles.append(handle)
            self._images_container[path] = handles
        return list(self._images_container[path])

    def _divide(
        self, path: str, all_num: int, num_x: int, num_y: int, size_x: int, size_y: int
    ) -> list[Any]:
        if all_num <= 0 or num_x <= 0 or num_y <= 0 or size_x <= 0 or size_y <= 0:
            raise ResourceError(f"failed to load {path}")
        sheet = self._load(self._image_loader, path)
        bounds = sheet.get_rect()
        cells = []
        for index in range(all_num):
            row, col = divmod(index, num_x)
            cell = pygame.Rect(col * size_x, row * size_y, size_x, size_y)
            if row >= num_y or not bounds.contains(cell):
                raise ResourceError(f"failed to load {path}")
            cells.append(sheet.subsurface(cell))
        return cells

    def get_sounds(self, file_path: str | os.PathLike[str]) -> int:
        """Handle for a sound file."""
        path = os.fspath(file_path)
        if path not in self._sounds_container:
            sound = self._load(self._sound_loader, path)
            handle = next(self._handles)
            self._sounds[handle] = sound
            self._sounds_container[path] = handle
        return self._sounds_container[path]

    def image(self, handle: int) -> Any:
        """The surface behind an image handle."""
        try:
            return self._surfaces[handle]
        except KeyError:
            raise ResourceError(f"unknown image handle {handle}") from None

    def sound(self, handle: int) -> Any:
        """The sound behind a sound handle."""
        try:
            return self._sounds[handle]
        except KeyError:
            raise ResourceError(f"unknown sound handle {handle}") from None

    def unload_images(self) -> None:
        """Forget every loaded image."""
        self._images_container.clear()
        self._surfaces.clear()

    def unload_sounds(self) -> None:
        """Forget every loaded sound."""
        self._sounds_container.clear()
        self._sounds.clear()


def _rect(x1: float, y1: float, x2: float, y2: float) -> pygame.Rect:
    left, right = sorted((int(x1), int(x2)))
    top, bottom = sorted((int(y1), int(y2)))
    return pygame.Rect(left, top, right - left, bottom - top)


class Canvas:
    """Draws handles and primitives onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        resources: ResourceManager | None = None,
        font_path: str | None = None,
    ) -> None:
        self.surface = surface
        self.resources = resources if resources is not None else ResourceManager.get_instance()
        self.font_path = font_path
        self._font_size = 16
        self._fonts: dict[int, pygame.font.Font] = {}

    def _image(self, handle: int) -> pygame.Surface | None:
        try:
            return self.resources.image(handle)
        except ResourceError:
            return None

    def draw_rota_graph(
        self, x: float, y: float, scale: float, angle: float, handle: int, flip: bool = False
    ) -> None:
        """Draw an image centred on (x, y), scaled, rotated (radians) and flipped."""
        image = self._image(handle)
        if image is None:
            return
        if flip:
            image = pygame.transform.flip(image, True, False)
        if scale != 1.0 or angle != 0.0:
            image = pygame.transform.rotozoom(image, -math.degrees(angle), scale)
        self.surface.blit(image, image.get_rect(center=(round(x), round(y))))

    def draw_extend_graph(self, x1: float, y1: float, x2: float, y2: float, handle: int) -> None:
        """Draw an image stretched over a rectangle."""
        image = self._image(handle)
        width, height = int(x2 - x1), int(y2 - y1)
        if image is None or width <= 0 or height <= 0:
            return
        self.surface.blit(pygame.transform.scale(image, (width, height)), (int(x1), int(y1)))

    def draw_box(self, x1: float, y1: float, x2: float, y2: float, color, fill: bool) -> None:
        """Draw a rectangle, filled or outlined."""
        pygame.draw.rect(self.surface, color, _rect(x1, y1, x2, y2), 0 if fill else 1)

    def draw_circle(self, x: float, y: float, radius: float, color, fill: bool) -> None:
        """Draw a circle, filled or outlined."""
        pygame.draw.circle(self.surface, color, (round(x), round(y)), radius, 0 if fill else 1)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color) -> None:
        """Draw a one-pixel line."""
        pygame.draw.line(self.surface, color, (round(x1), round(y1)), (round(x2), round(y2)), 1)

    def _font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(self._font_size)
        if font is None:
            font = pygame.font.Font(self.font_path, self._font_size)
            self._fonts[self._font_size] = font
        return font

    def draw_text(self, x: float, y: float, color, text: str) -> None:
        """Draw text with its top-left corner at (x, y)."""
        rendered = self._font().render(text, True, color)
        self.surface.blit(rendered, (int(x), int(y)))

    def set_font_size(self, size: int) -> None:
        """Set the size used by later text."""
        self._font_size = size

    def fill_alpha(self, color, alpha: float) -> None:
        """Blend a colour over the whole surface with the given opacity (0-255)."""
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        level = max(0, min(255, int(alpha)))
        overlay.fill((color[0], color[1], color[2], level))
        self.surface.blit(overlay, (0, 0))

    def clear(self) -> None:
        """Fill the surface with black."""
        self.surface.fill((0, 0, 0))