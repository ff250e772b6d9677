import os

import pygame
import pytest
from hypothesis import HealthCheck, settings

from koch.fractal import FractalModel

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_koch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop KOCH_* overrides from the host so defaults stay deterministic."""

    for name in list(os.environ):
        if name.startswith("KOCH_") and name != "KOCH_LOG_DIR":
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield


@pytest.fixture()
def triangle() -> FractalModel:
    return FractalModel.new_triangle(1.0, max_level=7)
