"""Decode a backslash-delimited path into a native path."""

from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def from_backslash(text: str, *, flavour: str | SlashFlavour | None = None) -> PurePath:
    """Convert a path separated with ``\\`` into a native path.

    Every ``\\`` is replaced with the native separator, so POSIX callers can
    parse Windows-style relative paths. On Windows this is an identity wrap.

    Examples:
        >>> from_backslash("foo\\\\bar", flavour="posix")
        PurePosixPath('foo/bar')
    """
    return get_flavour(flavour).from_backslash(text)
