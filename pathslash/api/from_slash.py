"""Decode a slash path into a native path."""

from pathlib import PurePath

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def from_slash(text: str, *, flavour: str | SlashFlavour | None = None) -> PurePath:
    """Convert a slash path (separated with ``/``) into a native path.

    Every ``/`` is replaced with the native separator; on POSIX this is
    simply ``PurePosixPath(text)``. Never fails.

    Args:
        text: Slash path string
        flavour: Flavour name or instance; defaults to the active flavour

    Returns:
        Pure path of the flavour's type

    Examples:
        >>> from_slash("foo/bar/piyo.txt", flavour="windows")
        PureWindowsPath('foo/bar/piyo.txt')
    """
    return get_flavour(flavour).from_slash(text)
