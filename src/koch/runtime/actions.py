from enum import StrEnum

from koch.view import PanDirection


class Action(StrEnum):
    QUIT = "quit"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"
    LEVEL_UP = "level_up"
    LEVEL_DOWN = "level_down"
    RESET = "reset"

    @property
    def pan_direction(self) -> PanDirection | None:
        return PAN_DIRECTIONS.get(self)


PAN_DIRECTIONS = {
    Action.PAN_UP: PanDirection.UP,
    Action.PAN_DOWN: PanDirection.DOWN,
    Action.PAN_LEFT: PanDirection.LEFT,
    Action.PAN_RIGHT: PanDirection.RIGHT,
}
