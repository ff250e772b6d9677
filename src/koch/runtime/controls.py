import pygame

from koch.runtime.actions import Action

KEY_ACTIONS: dict[int, Action] = {
    pygame.K_q: Action.QUIT,
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_PLUS: Action.ZOOM_IN,
    pygame.K_KP_PLUS: Action.ZOOM_IN,
    # "+" shares a key with "=" on most layouts.
    pygame.K_EQUALS: Action.ZOOM_IN,
    pygame.K_MINUS: Action.ZOOM_OUT,
    pygame.K_KP_MINUS: Action.ZOOM_OUT,
    pygame.K_LEFT: Action.PAN_LEFT,
    pygame.K_RIGHT: Action.PAN_RIGHT,
    pygame.K_UP: Action.PAN_UP,
    pygame.K_DOWN: Action.PAN_DOWN,
    pygame.K_PAGEUP: Action.LEVEL_UP,
    pygame.K_PAGEDOWN: Action.LEVEL_DOWN,
    pygame.K_SPACE: Action.LEVEL_DOWN,
    pygame.K_HOME: Action.RESET,
}


class KeyboardControls:
    """Translate pygame events into :class:`Action` values.

    Keys act on release so holding a key does not repeat the action.
    """

    def __init__(self, key_actions: dict[int, Action] | None = None) -> None:
        self.key_actions = dict(KEY_ACTIONS if key_actions is None else key_actions)

    def action_for(self, event: pygame.event.Event) -> Action | None:
        if event.type == pygame.QUIT:
            return Action.QUIT
        if event.type == pygame.KEYUP:
            return self.key_actions.get(event.key)
        return None
