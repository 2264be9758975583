"""Convert file paths to and from "slash paths".

A slash path is a path whose components are always separated by ``/`` and
never ``\\``. On POSIX the native separator already is ``/`` and conversion
is an identity. On Windows separators are rewritten while platform prefixes
(``C:``, ``\\\\server\\share``, ``\\\\?\\C:``) are kept verbatim.
"""

import logging

from .api import (
    cow_from_backslash,
    cow_from_backslash_lossy,
    cow_from_slash,
    cow_from_slash_lossy,
    from_backslash,
    from_backslash_lossy,
    from_slash,
    from_slash_lossy,
    split_components,
    to_slash,
    to_slash_cow,
    to_slash_lossy,
    to_slash_lossy_cow,
)
from .api.config import SlashConfig, SlashConfigError
from .api.flavour import PosixFlavour, SlashFlavour, WindowsFlavour, get_flavour, reset_flavour
from .api.types import Borrowed, Component, ComponentKind, Cow, Owned
from .EncodingError import EncodingError

logging.getLogger("pathslash").addHandler(logging.NullHandler())

__all__ = [
    "Borrowed",
    "Component",
    "ComponentKind",
    "Cow",
    "EncodingError",
    "Owned",
    "PosixFlavour",
    "SlashConfig",
    "SlashConfigError",
    "SlashFlavour",
    "WindowsFlavour",
    "cow_from_backslash",
    "cow_from_backslash_lossy",
    "cow_from_slash",
    "cow_from_slash_lossy",
    "from_backslash",
    "from_backslash_lossy",
    "from_slash",
    "from_slash_lossy",
    "get_flavour",
    "reset_flavour",
    "split_components",
    "to_slash",
    "to_slash_cow",
    "to_slash_lossy",
    "to_slash_lossy_cow",
]
