"""
signai.logger

Sets up loguru for the command line tools. Library code just logs through
`loguru.logger`; this module decides where it goes and how much of it.

"""

import sys

from loguru import logger

log = logger

LEVELS = ["WARNING", "INFO", "DEBUG"]


def initialize(verbose: int = 0) -> None:
    """Install a single stderr sink, more -v means more output."""
    level = LEVELS[min(verbose, len(LEVELS) - 1)]
    logger.remove()
    logger.enable("signai")
    logger.add(sys.stderr, format="[{level}] {message}", level=level)
