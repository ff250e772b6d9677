from koch.runtime.actions import Action as Action
from koch.runtime.driver import KochDriver as KochDriver
from koch.runtime.driver import viewport_transform as viewport_transform
from koch.runtime.game_loop import GameLoop as GameLoop
