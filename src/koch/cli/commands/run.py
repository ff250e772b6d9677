from typing import Annotated

import typer

from koch.runtime import GameLoop, KochDriver
from koch.runtime.display_context import DisplayContext
from koch.utilities.env import Configuration
from koch.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    side: Annotated[
        float | None,
        typer.Option("--side", help="Side length of the seed triangle"),
    ] = None,
    max_level: Annotated[
        int | None,
        typer.Option("--max-level", min=0, help="Deepest recursion level allowed"),
    ] = None,
    width: Annotated[
        int | None, typer.Option("--width", min=16, help="Window width in pixels")
    ] = None,
    height: Annotated[
        int | None, typer.Option("--height", min=16, help="Window height in pixels")
    ] = None,
    fullscreen: Annotated[
        bool | None,
        typer.Option("--fullscreen/--windowed", help="Open a fullscreen window"),
    ] = None,
) -> None:
    try:
        side = Configuration.triangle_side() if side is None else side
        max_level = Configuration.max_level() if max_level is None else max_level
        default_width, default_height = Configuration.window_size()
        fullscreen = Configuration.fullscreen() if fullscreen is None else fullscreen
        driver = KochDriver.create(side, max_level=max_level)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    display = DisplayContext(
        size=(width or default_width, height or default_height),
        fullscreen=fullscreen,
    )
    logger.info("Starting with side=%s max_level=%d", side, max_level)
    GameLoop(driver=driver, display=display).start()
