from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour
from .types.Cow import Cow


def cow_from_backslash(text: str, *, flavour: str | SlashFlavour | None = None) -> Cow[PurePath]:
    """Copy-on-write ``from_backslash``."""
    return get_flavour(flavour).cow_from_backslash(text)
