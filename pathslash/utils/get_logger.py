import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``pathslash`` namespace.

    Nothing is emitted until an application calls ``configure_logging`` or
    attaches its own handlers to the ``pathslash`` logger.
    """
    return logging.getLogger(f"pathslash.{name}")
