import logging
import os
from dataclasses import dataclass, field

DEFAULT_PROMPT = "user> "


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if unset or not a logging level name.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    log_level: int = field(default_factory=get_log_level)
