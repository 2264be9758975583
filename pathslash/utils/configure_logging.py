import logging
import sys

from ..constants import LOG_FORMAT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure pathslash logging to stderr.

    Attaches a single stream handler to the ``pathslash`` logger. Later calls
    only adjust the level.

    Args:
        level: Logging level name or number
    """
    global _CONFIGURED

    root_logger = logging.getLogger("pathslash")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
