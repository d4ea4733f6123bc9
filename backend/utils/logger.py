"""
Logging setup shared by the app factory and the runner.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level="INFO"):
    """Install a single stdout handler on the root logger.

    Calling it again only adjusts the level, so building several apps in one
    process (tests) does not duplicate output.
    """
    global _configured

    root = logging.getLogger()
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level)
