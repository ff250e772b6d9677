from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from koch.runtime.actions import Action
from koch.runtime.controls import KeyboardControls
from koch.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass
class EventBatch:
    actions: list[Action] = field(default_factory=list)
    resized: bool = False

    @property
    def dirty(self) -> bool:
        return self.resized or bool(self.actions)


class PygameEventHandler:
    def __init__(self, controls: KeyboardControls | None = None) -> None:
        self.controls = controls or KeyboardControls()

    def collect(self, events: list[pygame.event.Event]) -> EventBatch:
        batch = EventBatch()
        for event in events:
            if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                batch.resized = True
                continue
            action = self.controls.action_for(event)
            if action is not None:
                logger.debug("Event %s -> %s", pygame.event.event_name(event.type), action)
                batch.actions.append(action)
        return batch

    def wait(self) -> EventBatch:
        """Block for the next event, then drain whatever else is queued."""
        events = [pygame.event.wait()]
        events.extend(pygame.event.get())
        return self.collect(events)
