from koch.utilities.env.fractal import FractalConfiguration
from koch.utilities.env.view import ViewConfiguration
from koch.utilities.env.window import WindowConfiguration


class Configuration(
    FractalConfiguration,
    ViewConfiguration,
    WindowConfiguration,
):
    """Aggregate environment configuration helpers."""
