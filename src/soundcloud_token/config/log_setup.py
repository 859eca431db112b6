"""Logging configuration shared by applications mounting the strategy"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the package's standard format."""
    level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)
