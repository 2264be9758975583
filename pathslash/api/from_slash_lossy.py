"""Decode raw platform text holding a slash path."""

import os
from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def from_slash_lossy(raw: str | bytes | os.PathLike, *, flavour: str | SlashFlavour | None = None) -> PurePath:
    """Convert raw platform text into a native path.

    ``raw`` may hold data that is not valid Unicode (bytes, or a string with
    lone surrogates). It is first coerced to Unicode with U+FFFD substituted
    for each invalid unit, then decoded like ``from_slash``.
    """
    return get_flavour(flavour).from_slash_lossy(raw)
