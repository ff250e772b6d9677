from __future__ import annotations

from dataclasses import dataclass

from koch.fractal import FractalModel
from koch.geometry import Affine2D
from koch.runtime.actions import Action
from koch.utilities.logging import get_logger
from koch.view import ProjectedSegment, ViewCamera

logger = get_logger(__name__)


def viewport_transform(width: float, height: float) -> Affine2D:
    """Map the normalized ``[-1, 1]`` square onto a ``width`` x ``height`` window.

    The square is centred and fitted to the shorter side. Y is not flipped, so
    model ``+y`` points down the screen.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must have a positive size, got {width}x{height}")
    scale = min(width, height) * 0.5
    return Affine2D.translation(width / 2.0, height / 2.0).scale(scale, scale)


@dataclass
class KochDriver:
    model: FractalModel
    camera: ViewCamera

    @classmethod
    def create(
        cls, side: float, max_level: int | None = None
    ) -> KochDriver:
        return cls(
            model=FractalModel.new_triangle(side, max_level=max_level),
            camera=ViewCamera(),
        )

    def apply(self, action: Action) -> bool:
        """Dispatch ``action``; returns ``False`` once the driver should stop."""
        match action:
            case Action.QUIT:
                logger.info("Quit requested")
                return False
            case Action.ZOOM_IN:
                self.camera.zoom_in()
            case Action.ZOOM_OUT:
                self.camera.zoom_out()
            case Action.PAN_UP | Action.PAN_DOWN | Action.PAN_LEFT | Action.PAN_RIGHT:
                self.camera.pan(action.pan_direction)
            case Action.LEVEL_UP:
                if self.model.level_up():
                    logger.info(
                        "Level %d: %d points", self.model.level, len(self.model)
                    )
                else:
                    logger.info("Already at max level %d", self.model.max_level)
            case Action.LEVEL_DOWN:
                if self.model.level_down():
                    logger.info(
                        "Level %d: %d points", self.model.level, len(self.model)
                    )
                else:
                    logger.info("Already at level 0")
            case Action.RESET:
                self.camera.reset()
                logger.info("View reset")
        return True

    def frame(self, output_transform: Affine2D) -> list[ProjectedSegment]:
        return self.camera.project(self.model, output_transform)
