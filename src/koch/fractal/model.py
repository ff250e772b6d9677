from __future__ import annotations

import cmath
import math
from dataclasses import dataclass, field

import numpy as np

from koch.geometry import Point
from koch.utilities.env import Configuration
from koch.utilities.logging import get_logger

logger = get_logger(__name__)

# Rotating the one-third vector by -60 degrees puts the bump on the outside of
# a counter-clockwise seed.
PEAK_ROTATION = cmath.exp(-1j * math.pi / 3)
TRIANGLE_SEGMENTS = 3


def koch_subdivide(line: np.ndarray) -> np.ndarray:
    """Replace every segment of ``line`` with the four segments of a Koch bump.

    ``line`` is a complex polyline of length ``n``; the result has length
    ``4 * (n - 1) + 1`` and keeps the original last point.
    """

    start = line[:-1]
    vector = line[1:] - start
    base_left = start + vector / 3.0
    peak = base_left + PEAK_ROTATION * vector / 3.0
    base_right = start + 2.0 * vector / 3.0

    subdivided = np.empty(4 * len(start) + 1, dtype=np.complex128)
    subdivided[0:-1:4] = start
    subdivided[1:-1:4] = base_left
    subdivided[2:-1:4] = peak
    subdivided[3:-1:4] = base_right
    subdivided[-1] = line[-1]
    return subdivided


def koch_simplify(line: np.ndarray) -> np.ndarray:
    """Undo one :func:`koch_subdivide` pass by keeping every fourth point."""

    return np.append(line[:-1:4], line[-1])


@dataclass(eq=False)
class FractalModel:
    line: np.ndarray
    max_level: int
    level: int = 0
    initial_segment_count: int = field(init=False)

    def __post_init__(self) -> None:
        if self.max_level < 0:
            raise ValueError(f"max_level must be at least 0, got {self.max_level}")
        if not 0 <= self.level <= self.max_level:
            raise ValueError(
                f"level must be between 0 and {self.max_level}, got {self.level}"
            )
        if len(self.line) < 2:
            raise ValueError("A fractal polyline needs at least two vertices")
        initial_segment_count, remainder = divmod(len(self.line) - 1, 4**self.level)
        if remainder:
            raise ValueError(
                f"{len(self.line) - 1} segments cannot come from {self.level} "
                "subdivision passes"
            )
        self.initial_segment_count = initial_segment_count

    @classmethod
    def new_triangle(cls, side: float, max_level: int | None = None) -> FractalModel:
        """Seed a model with a closed equilateral triangle centred on its centroid."""
        if not side > 0:
            raise ValueError(f"Triangle side must be positive, got {side!r}")
        if max_level is None:
            max_level = Configuration.max_level()

        height = side * math.sqrt(3.0) / 2.0
        bottom_left = complex(-0.5 * side, -height / 3.0)
        line = np.array(
            [
                bottom_left,
                complex(0.5 * side, -height / 3.0),
                complex(0.0, 2.0 / 3.0 * height),
                bottom_left,
            ],
            dtype=np.complex128,
        )
        return cls(line=line, max_level=max_level)

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple(Point(float(z.real), float(z.imag)) for z in self.line)

    @property
    def points(self) -> np.ndarray:
        """The polyline as an ``(n, 2)`` float array."""
        return np.column_stack((self.line.real, self.line.imag))

    @property
    def segment_count(self) -> int:
        return len(self.line) - 1

    def __len__(self) -> int:
        return len(self.line)

    def is_closed(self) -> bool:
        return bool(self.line[0] == self.line[-1])

    def level_up(self) -> bool:
        if self.level >= self.max_level:
            return False
        logger.debug("Start iteration. #points=%d", len(self.line))
        self.line = koch_subdivide(self.line)
        self.level += 1
        assert self.segment_count == self.initial_segment_count * 4**self.level
        logger.debug("Stop iteration. #points=%d", len(self.line))
        return True

    def level_down(self) -> bool:
        if self.level == 0:
            return False
        self.line = koch_simplify(self.line)
        self.level -= 1
        assert self.segment_count == self.initial_segment_count * 4**self.level
        logger.debug("Level down. #points=%d", len(self.line))
        return True
