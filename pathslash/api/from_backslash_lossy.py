import os
from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def from_backslash_lossy(raw: str | bytes | os.PathLike, *, flavour: str | SlashFlavour | None = None) -> PurePath:
    """Like ``from_backslash`` for raw platform text, substituting U+FFFD for invalid units."""
    return get_flavour(flavour).from_backslash_lossy(raw)
