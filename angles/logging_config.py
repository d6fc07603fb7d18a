"""Logging setup for the ``angle-report`` command.

The library itself never installs handlers; applications (and the CLI) call
:func:`setup_logging` once at start-up.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from environs import Env

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_level(env: Env, level: Optional[str] = None) -> int:
    """Return the numeric log level from *level* or the environment.

    ``ANGLES_LOG_LEVEL`` defaults to ``WARNING``; ``ANGLES_DEBUG=true`` forces
    ``DEBUG``.  An explicit *level* wins over both.
    """
    if level is None:
        level = env.str("ANGLES_LOG_LEVEL", "WARNING")
        if env.bool("ANGLES_DEBUG", default=False):
            level = "DEBUG"

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def setup_logging(env: Env, level: Optional[str] = None) -> None:
    """Configure the root logger unless something already did.

    When the root logger is already configured an explicit *level* still
    applies to the ``angles`` logger.
    """
    numeric_level = resolve_level(env, level)
    if logging.root.handlers:
        if level is not None:
            logging.getLogger("angles").setLevel(numeric_level)
        return

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("angles").setLevel(numeric_level)
