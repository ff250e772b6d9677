import pytest

from koch.geometry import Point
from koch.runtime import Action, KochDriver, viewport_transform
from koch.view import PanDirection


@pytest.fixture()
def driver() -> KochDriver:
    return KochDriver.create(1.0, max_level=3)


class TestKochDriver:
    """Make sure every action reaches the component that owns it."""

    def test_quit_stops_driver(self, driver: KochDriver) -> None:
        assert driver.apply(Action.QUIT) is False

    @pytest.mark.parametrize(
        "action, expected_view_size",
        [(Action.ZOOM_IN, 2.0 / 1.1), (Action.ZOOM_OUT, 2.2)],
    )
    def test_zoom_actions(
        self, driver: KochDriver, action: Action, expected_view_size: float
    ) -> None:
        assert driver.apply(action) is True
        assert driver.camera.view_size == pytest.approx(expected_view_size)
        assert driver.model.level == 0

    @pytest.mark.parametrize(
        "action, direction",
        [
            (Action.PAN_UP, PanDirection.UP),
            (Action.PAN_DOWN, PanDirection.DOWN),
            (Action.PAN_LEFT, PanDirection.LEFT),
            (Action.PAN_RIGHT, PanDirection.RIGHT),
        ],
    )
    def test_pan_actions(
        self, driver: KochDriver, action: Action, direction: PanDirection
    ) -> None:
        assert action.pan_direction is direction

        driver.apply(action)

        assert driver.camera.center != Point(0.0, 0.0)
        assert driver.camera.view_size == 2.0

    def test_level_actions(self, driver: KochDriver) -> None:
        driver.apply(Action.LEVEL_UP)
        driver.apply(Action.LEVEL_UP)
        assert driver.model.level == 2

        driver.apply(Action.LEVEL_DOWN)
        assert driver.model.level == 1
        assert driver.camera.view_size == 2.0

    def test_level_actions_respect_bounds(self, driver: KochDriver) -> None:
        assert driver.apply(Action.LEVEL_DOWN) is True
        assert driver.model.level == 0

        for _ in range(10):
            driver.apply(Action.LEVEL_UP)
        assert driver.model.level == 3

    def test_reset_restores_default_view_and_keeps_level(
        self, driver: KochDriver
    ) -> None:
        driver.apply(Action.LEVEL_UP)
        driver.apply(Action.ZOOM_IN)
        driver.apply(Action.PAN_LEFT)

        assert driver.apply(Action.RESET) is True

        assert driver.camera.view_size == 2.0
        assert driver.camera.center == Point(0.0, 0.0)
        assert driver.model.level == 1

    def test_non_pan_actions_have_no_direction(self) -> None:
        assert Action.ZOOM_IN.pan_direction is None

    def test_frame_projects_current_model(self, driver: KochDriver) -> None:
        driver.apply(Action.LEVEL_UP)
        segments = driver.frame(viewport_transform(200, 100))
        assert len(segments) == 12


class TestViewportTransform:
    def test_maps_normalized_square_to_centered_square(self) -> None:
        transform = viewport_transform(200, 100)

        assert transform.apply(0.0, 0.0) == pytest.approx(Point(100.0, 50.0))
        assert transform.apply(1.0, 1.0) == pytest.approx(Point(150.0, 100.0))
        assert transform.apply(-1.0, -1.0) == pytest.approx(Point(50.0, 0.0))

    def test_rejects_empty_viewport(self) -> None:
        with pytest.raises(ValueError, match="positive size"):
            viewport_transform(0, 100)
