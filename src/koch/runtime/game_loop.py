from __future__ import annotations

import pygame

from koch.runtime.display_context import DisplayContext
from koch.runtime.driver import KochDriver, viewport_transform
from koch.runtime.pygame_event_handler import EventBatch, PygameEventHandler
from koch.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND_COLOR = (255, 255, 255)
LINE_COLOR = (0, 0, 0)
MIN_LINE_PIXELS = 1


class GameLoop:
    """Render-then-wait loop: draws a frame, blocks for input, repeats.

    Frames are redrawn only after an event that changes what is on screen.
    """

    def __init__(
        self,
        driver: KochDriver,
        display: DisplayContext,
        event_handler: PygameEventHandler | None = None,
    ) -> None:
        self.driver = driver
        self.display = display
        self.event_handler = event_handler or PygameEventHandler()
        self.running = False

    def start(self) -> None:
        logger.info("Starting GameLoop")
        pygame.init()
        self.display.initialize()
        self.running = True
        try:
            self._run_main_loop()
        finally:
            pygame.quit()
            logger.info("GameLoop stopped")

    def _run_main_loop(self) -> None:
        dirty = True
        while self.running:
            if dirty:
                self.run_frame(self.display.ensure_initialized())
                self.display.present()
            batch = self.event_handler.wait()
            dirty = self.handle(batch)

    def handle(self, batch: EventBatch) -> bool:
        """Apply a batch of events; returns whether a redraw is needed."""
        if batch.resized:
            self.display.refresh_surface()
        for action in batch.actions:
            if not self.driver.apply(action):
                self.running = False
                break
        return batch.dirty

    def run_frame(self, surface: pygame.Surface) -> int:
        """Draw the current model onto ``surface``; returns the segment count."""
        output = viewport_transform(*surface.get_size())
        pixels_per_unit = output.compose(
            self.driver.camera.camera_transform()
        ).linear_scale()

        surface.fill(BACKGROUND_COLOR)
        segments = self.driver.frame(output)
        for start, end, thickness in segments:
            width = max(MIN_LINE_PIXELS, round(thickness * pixels_per_unit))
            pygame.draw.line(surface, LINE_COLOR, start, end, width)
        logger.debug("Rendered %d segments", len(segments))
        return len(segments)
