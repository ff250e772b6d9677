from koch.utilities.env.parsing import _env_float

DEFAULT_ZOOM_STEP = 0.10
DEFAULT_PAN_STEP = 0.05
DEFAULT_STROKE_WIDTH = 0.001
DEFAULT_MIN_VIEW_SIZE = 1e-9


class ViewConfiguration:
    @classmethod
    def zoom_step(cls) -> float:
        return _env_float("KOCH_ZOOM_STEP", default=DEFAULT_ZOOM_STEP, positive=True)

    @classmethod
    def pan_step(cls) -> float:
        return _env_float("KOCH_PAN_STEP", default=DEFAULT_PAN_STEP, positive=True)

    @classmethod
    def stroke_width(cls) -> float:
        return _env_float(
            "KOCH_STROKE_WIDTH", default=DEFAULT_STROKE_WIDTH, minimum=0.0
        )

    @classmethod
    def min_view_size(cls) -> float:
        return _env_float(
            "KOCH_MIN_VIEW_SIZE", default=DEFAULT_MIN_VIEW_SIZE, positive=True
        )
