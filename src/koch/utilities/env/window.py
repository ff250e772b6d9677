from koch.utilities.env.parsing import _env_flag, _env_int

DEFAULT_WINDOW_SIZE = 768
MIN_WINDOW_SIZE = 16


class WindowConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        width = _env_int(
            "KOCH_WINDOW_WIDTH", default=DEFAULT_WINDOW_SIZE, minimum=MIN_WINDOW_SIZE
        )
        height = _env_int(
            "KOCH_WINDOW_HEIGHT", default=DEFAULT_WINDOW_SIZE, minimum=MIN_WINDOW_SIZE
        )
        return width, height

    @classmethod
    def fullscreen(cls) -> bool:
        return _env_flag("KOCH_FULLSCREEN")
