"""Encode a native path as a slash path (lossy)."""

import os

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def to_slash_lossy(path: str | os.PathLike, *, flavour: str | SlashFlavour | None = None) -> str:
    """Convert a native path into a slash path, never failing.

    Same as ``to_slash`` except that every unit which is not valid Unicode
    is replaced with U+FFFD.
    """
    return get_flavour(flavour).to_slash_lossy(path)
