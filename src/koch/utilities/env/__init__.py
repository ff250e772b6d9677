"""Environment configuration helpers."""

from koch.utilities.env.config import Configuration as Configuration
