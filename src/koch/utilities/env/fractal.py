from koch.utilities.env.parsing import _env_float, _env_int

DEFAULT_MAX_LEVEL = 7
DEFAULT_TRIANGLE_SIDE = 1.0


class FractalConfiguration:
    @classmethod
    def max_level(cls) -> int:
        return _env_int("KOCH_MAX_LEVEL", default=DEFAULT_MAX_LEVEL, minimum=0)

    @classmethod
    def triangle_side(cls) -> float:
        return _env_float(
            "KOCH_TRIANGLE_SIDE", default=DEFAULT_TRIANGLE_SIDE, positive=True
        )
