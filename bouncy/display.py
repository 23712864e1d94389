"""The window and the textures drawn into it."""

from __future__ import annotations

from types import TracebackType

import pygame

WINDOW_SIZE = (900, 900)


class Display:
    """A fixed-size window with a cache of named textures."""

    def __init__(self, window_name: str) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError("video initialisation failed") from exc
        pygame.display.set_caption(window_name)
        self.screen = pygame.display.set_mode(WINDOW_SIZE)
        self.textures: dict[str, pygame.Surface] = {}

    @property
    def size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return self.screen.get_size()

    def __enter__(self) -> Display:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Drop all textures and shut the window."""
        self.textures.clear()
        pygame.display.quit()

    def get_texture(self, name: str) -> pygame.Surface | None:
        """The texture stored under ``name``, or None."""
        return self.textures.get(name)

    def load_texture(self, path: str, name: str) -> None:
        """Load an image file and store it under ``name``."""
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(str(exc)) from exc
        self.textures[name] = surface.convert_alpha()