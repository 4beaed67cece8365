"""Runtime settings for agentgraph.

Values come from the process environment, optionally seeded from a .env file.
Adapter option defaults live with the adapters themselves and are never read
from here, so a translation only depends on its inputs.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # load environment variables from .env file

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """settings resolved from the environment."""

    log_level: str = "WARNING"
    allow_cycles: bool = False
    cors_origins: tuple[str, ...] = ("*",)


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        log_level=os.getenv("AGENTGRAPH_LOG_LEVEL", "WARNING").upper(),
        allow_cycles=os.getenv("AGENTGRAPH_ALLOW_CYCLES", "false").lower() in _TRUE_VALUES,
        # comma-separated values for multiple origins, or "*" for all (development only)
        cors_origins=tuple(
            origin.strip()
            for origin in os.getenv("AGENTGRAPH_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ),
    )


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    settings = settings or get_settings()
    logger = logging.getLogger("agentgraph")
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)
    return logger
