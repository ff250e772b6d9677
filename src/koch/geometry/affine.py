from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Affine2D:
    """A 2x3 affine matrix acting on column vectors.

    ``[[a, b, tx], [c, d, ty]]`` maps ``(x, y)`` to
    ``(a*x + b*y + tx, c*x + d*y + ty)``.

    ``scale`` and ``translate`` chain the way a graphics context does: the
    operation listed first is outermost, so ``t.scale(2).translate(1, 0)``
    translates a point first and scales the result second.
    """

    a: float = 1.0
    b: float = 0.0
    tx: float = 0.0
    c: float = 0.0
    d: float = 1.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> Affine2D:
        return cls()

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> Affine2D:
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def translation(cls, tx: float, ty: float) -> Affine2D:
        return cls(tx=tx, ty=ty)

    def compose(self, other: Affine2D) -> Affine2D:
        """Return ``self ∘ other``: ``other`` is applied to a point first."""
        return Affine2D(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            tx=self.a * other.tx + self.b * other.ty + self.tx,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            ty=self.c * other.tx + self.d * other.ty + self.ty,
        )

    def scale(self, sx: float, sy: float | None = None) -> Affine2D:
        return self.compose(Affine2D.scaling(sx, sy))

    def translate(self, tx: float, ty: float) -> Affine2D:
        return self.compose(Affine2D.translation(tx, ty))

    def apply(self, x: float, y: float) -> Point:
        return Point(
            self.a * x + self.b * y + self.tx,
            self.c * x + self.d * y + self.ty,
        )

    def apply_many(self, points: np.ndarray) -> np.ndarray:
        """Transform an ``(n, 2)`` array of points in one pass."""
        points = np.asarray(points, dtype=np.float64)
        linear = np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)
        return points @ linear.T + np.array([self.tx, self.ty], dtype=np.float64)

    def linear_scale(self) -> float:
        """Length scale factor of the linear part, exact for uniform scaling."""
        return math.sqrt(abs(self.a * self.d - self.b * self.c))
