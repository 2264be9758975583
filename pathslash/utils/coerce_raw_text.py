"""Coerce raw platform text into valid Unicode text."""

import os

from .replace_invalid_unicode import replace_invalid_unicode


def coerce_raw_text(raw: str | bytes | os.PathLike) -> str:
    """Turn raw platform text into valid Unicode, substituting U+FFFD.

    Bytes are decoded as UTF-8 with replacement; strings have their lone
    surrogates replaced. A string that is already valid comes back as the
    same object.

    Args:
        raw: String, bytes, or path-like object holding either

    Returns:
        Text containing no invalid units
    """
    raw = os.fspath(raw)
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return replace_invalid_unicode(raw)
