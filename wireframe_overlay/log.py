#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="WARNING"):
    """
    Install a single stream handler on the package logger.

    The library itself never calls this; front ends do. Calling it again
    replaces the handler and level instead of stacking handlers.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    pkg_logger = logging.getLogger("wireframe_overlay")
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    return pkg_logger
