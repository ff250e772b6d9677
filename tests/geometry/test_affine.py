import numpy as np
import pytest

from koch.geometry import Affine2D, Point


def _homogeneous(transform: Affine2D) -> np.ndarray:
    return np.array(
        [
            [transform.a, transform.b, transform.tx],
            [transform.c, transform.d, transform.ty],
            [0.0, 0.0, 1.0],
        ]
    )


class TestAffineComposition:
    """Pin down composition order so camera and viewport transforms chain correctly."""

    def test_identity_leaves_points_alone(self) -> None:
        assert Affine2D.identity().apply(3.0, -4.0) == Point(3.0, -4.0)

    def test_first_listed_operation_is_outermost(self) -> None:
        """scale(2).translate(1, 0) translates first, then scales."""
        transform = Affine2D.identity().scale(2.0).translate(1.0, 0.0)

        assert transform.apply(0.0, 0.0) == pytest.approx(Point(2.0, 0.0))
        assert transform.apply(1.0, 1.0) == pytest.approx(Point(4.0, 2.0))

    def test_compose_applies_other_first(self) -> None:
        outer = Affine2D.translation(1.0, 0.0)
        inner = Affine2D.scaling(2.0)

        assert outer.compose(inner).apply(1.0, 1.0) == pytest.approx(Point(3.0, 2.0))
        assert inner.compose(outer).apply(1.0, 1.0) == pytest.approx(Point(4.0, 2.0))

    def test_compose_matches_matrix_product(self) -> None:
        first = Affine2D(a=1.0, b=2.0, tx=3.0, c=-1.0, d=0.5, ty=4.0)
        second = Affine2D(a=0.0, b=-1.0, tx=2.0, c=1.0, d=0.0, ty=-5.0)

        expected = _homogeneous(first) @ _homogeneous(second)

        assert np.allclose(_homogeneous(first.compose(second)), expected)

    def test_non_uniform_scaling(self) -> None:
        assert Affine2D.scaling(2.0, -3.0).apply(1.0, 1.0) == Point(2.0, -3.0)


class TestAffineApplication:
    def test_apply_many_matches_apply(self) -> None:
        transform = (
            Affine2D.translation(10.0, 5.0).scale(3.0, 2.0).translate(-1.0, 0.5)
        )
        points = np.array([[0.0, 0.0], [1.0, 2.0], [-4.0, 0.25]])

        projected = transform.apply_many(points)

        for (x, y), row in zip(points, projected):
            assert tuple(row) == pytest.approx(transform.apply(x, y))

    def test_apply_many_handles_empty_input(self) -> None:
        assert Affine2D.identity().apply_many(np.empty((0, 2))).shape == (0, 2)

    def test_linear_scale_ignores_translation(self) -> None:
        transform = Affine2D.translation(100.0, -7.0).scale(4.0)
        assert transform.linear_scale() == pytest.approx(4.0)

