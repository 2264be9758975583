"""Copy-on-write decode of a slash path."""

from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour
from .types.Cow import Cow


def cow_from_slash(text: str, *, flavour: str | SlashFlavour | None = None) -> Cow[PurePath]:
    """Convert a slash path into a native path, reusing ``text`` when possible.

    Returns ``Borrowed`` (with ``source`` being ``text`` itself) when no
    ``/`` had to be rewritten, and ``Owned`` otherwise. Either compares equal
    to ``from_slash(text)``.
    """
    return get_flavour(flavour).cow_from_slash(text)
