import os

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour
from .types.Cow import Cow


def to_slash_lossy_cow(path: str | os.PathLike, *, flavour: str | SlashFlavour | None = None) -> Cow[str]:
    """Copy-on-write ``to_slash_lossy``: ``Owned`` whenever a unit was substituted."""
    return get_flavour(flavour).to_slash_lossy_cow(path)
