import os
from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour
from .types.Cow import Cow


def cow_from_backslash_lossy(
    raw: str | bytes | os.PathLike, *, flavour: str | SlashFlavour | None = None
) -> Cow[PurePath]:
    """Copy-on-write ``from_backslash_lossy``."""
    return get_flavour(flavour).cow_from_backslash_lossy(raw)
