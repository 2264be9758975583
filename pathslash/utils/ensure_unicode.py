"""Strict check that text is valid Unicode."""

from ..EncodingError import EncodingError
from .get_logger import get_logger

logger = get_logger("utils.ensure_unicode")


def ensure_unicode(text: str) -> str:
    """Return ``text`` unchanged if it is valid Unicode.

    Raises:
        EncodingError: If ``text`` holds a lone surrogate, i.e. a unit that
            came from non-Unicode platform data.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.debug("Rejecting non-Unicode path text %r at index %d", text, e.start)
        raise EncodingError(text, e.start) from e
    return text
