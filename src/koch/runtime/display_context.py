from __future__ import annotations

from dataclasses import dataclass

import pygame

from koch.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "koch"


@dataclass
class DisplayContext:
    """Track and initialize the pygame window."""

    size: tuple[int, int]
    fullscreen: bool = False
    screen: pygame.Surface | None = None

    def initialize(self) -> None:
        pygame.display.init()
        pygame.display.set_caption(WINDOW_CAPTION)
        flags = pygame.FULLSCREEN if self.fullscreen else pygame.RESIZABLE
        size = (0, 0) if self.fullscreen else self.size
        self.screen = pygame.display.set_mode(size, flags)
        logger.info(
            "Opened %s window %dx%d",
            "fullscreen" if self.fullscreen else "resizable",
            *self.screen.get_size(),
        )

    def ensure_initialized(self) -> pygame.Surface:
        if self.screen is None:
            raise RuntimeError("Screen is not initialized")
        return self.screen

    def refresh_surface(self) -> None:
        # The display surface may be replaced on resize.
        surface = pygame.display.get_surface()
        if surface is not None:
            self.screen = surface

    def get_size(self) -> tuple[int, int]:
        return self.ensure_initialized().get_size()

    def present(self) -> None:
        pygame.display.flip()
