"""Separator strategies: one per native separator convention."""

from .get_flavour import get_flavour, native_flavour_name, reset_flavour
from .PosixFlavour import PosixFlavour
from .SlashFlavour import SlashFlavour
from .WindowsFlavour import WindowsFlavour

__all__ = [
    "PosixFlavour",
    "SlashFlavour",
    "WindowsFlavour",
    "get_flavour",
    "native_flavour_name",
    "reset_flavour",
]
