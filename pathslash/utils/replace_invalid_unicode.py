"""Lossy replacement of non-Unicode units."""

import re

from ..constants import REPLACEMENT_CHARACTER

# Lone surrogates: undecodable bytes (surrogateescape) or unpaired UTF-16 units
_INVALID_UNITS = re.compile("[\ud800-\udfff]")


def replace_invalid_unicode(text: str) -> str:
    """Replace each unit that is not valid Unicode with U+FFFD.

    Python keeps non-Unicode path data in ``str`` as lone surrogate code
    points. Each one stands for a single malformed unit and becomes exactly
    one replacement character. Valid text is returned as the same object.
    """
    if _INVALID_UNITS.search(text) is None:
        return text
    return _INVALID_UNITS.sub(REPLACEMENT_CHARACTER, text)
