"""
Configuration for the nodegraph library.

Settings are read from environment variables once, at import time.
"""
import logging
import math
import os
from random import Random
from typing import Optional, Union

# Log level used by configure_logging() (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("NODEGRAPH_LOG_LEVEL", "WARNING")

# Seed for graphs created without an explicit rng; unset means unseeded.
# Integer values seed as integers, anything else seeds as the string.
_seed = os.environ.get("NODEGRAPH_SEED")
RANDOM_SEED: Optional[Union[int, str]] = None
if _seed:
    try:
        RANDOM_SEED = int(_seed)
    except ValueError:
        RANDOM_SEED = _seed

# Cost of a node no path has reached yet
INFINITY = math.inf

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_rng() -> Random:
    """Return a fresh Random, seeded from NODEGRAPH_SEED when it is set."""
    return Random(RANDOM_SEED)


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic handler for the nodegraph loggers.

    The library itself never installs handlers; scripts and tests call this.
    """
    logger = logging.getLogger("nodegraph")
    logger.setLevel((level or LOG_LEVEL).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
