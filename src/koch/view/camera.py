from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple

from koch.fractal import FractalModel
from koch.geometry import Affine2D, Point
from koch.utilities.env import Configuration

DEFAULT_VIEW_SIZE = 2.0
DEFAULT_CENTER = Point(0.0, 0.0)


class PanDirection(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ProjectedSegment(NamedTuple):
    start: Point
    end: Point
    thickness: float


@dataclass
class ViewCamera:
    """Pan/zoom state for the square region of model space on screen.

    ``center`` is the model coordinate shown at the middle of the screen and
    ``view_size`` the side of the visible square, both in model units.
    """

    zoom_step: float = field(default_factory=Configuration.zoom_step)
    pan_step: float = field(default_factory=Configuration.pan_step)
    stroke_width: float = field(default_factory=Configuration.stroke_width)
    view_size: float = DEFAULT_VIEW_SIZE
    center: Point = DEFAULT_CENTER
    min_view_size: float = field(default_factory=Configuration.min_view_size)

    def __post_init__(self) -> None:
        if not self.view_size > 0:
            raise ValueError(f"view_size must be positive, got {self.view_size!r}")
        if not self.min_view_size > 0:
            raise ValueError(
                f"min_view_size must be positive, got {self.min_view_size!r}"
            )
        if not self.zoom_step > 0:
            raise ValueError(f"zoom_step must be positive, got {self.zoom_step!r}")
        self.center = Point(float(self.center[0]), float(self.center[1]))
        self._initial_view = (self.view_size, self.center)

    def reset(self) -> None:
        self.view_size, self.center = self._initial_view

    def zoom_in(self) -> None:
        self.view_size = max(
            self.view_size / (1.0 + self.zoom_step), self.min_view_size
        )

    def zoom_out(self) -> None:
        self.view_size *= 1.0 + self.zoom_step

    def pan(self, direction: PanDirection) -> None:
        """Move the view by one step; the picture scrolls the opposite way on screen."""
        delta = self.view_size * self.pan_step
        x, y = self.center
        match PanDirection(direction):
            case PanDirection.LEFT:
                x -= delta
            case PanDirection.RIGHT:
                x += delta
            case PanDirection.UP:
                y -= delta
            case PanDirection.DOWN:
                y += delta
        self.center = Point(x, y)

    @property
    def thickness(self) -> float:
        return self.stroke_width * self.view_size

    def camera_transform(self) -> Affine2D:
        """Map the visible square onto the normalized ``[-1, 1]`` square."""
        scale = 2.0 / self.view_size
        return Affine2D.scaling(scale).translate(-self.center.x, -self.center.y)

    def project(
        self, model: FractalModel, output_transform: Affine2D
    ) -> list[ProjectedSegment]:
        """Project the model polyline through the camera and ``output_transform``.

        ``output_transform`` maps the normalized square onto the viewport.
        """
        assert len(model) >= 2, "Cannot project a polyline with fewer than 2 vertices"

        transform = output_transform.compose(self.camera_transform())
        projected = transform.apply_many(model.points)
        thickness = self.thickness
        return [
            ProjectedSegment(
                Point(float(x0), float(y0)),
                Point(float(x1), float(y1)),
                thickness,
            )
            for (x0, y0), (x1, y1) in zip(projected[:-1], projected[1:])
        ]
