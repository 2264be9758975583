"""Encode a native path as a slash path (strict)."""

import os

from .flavour.get_flavour import get_flavour
from .flavour.SlashFlavour import SlashFlavour


def to_slash(path: str | os.PathLike, *, flavour: str | SlashFlavour | None = None) -> str:
    """Convert a native path into a slash path.

    Separators between components become ``/``. Platform prefixes (drive
    letters, UNC shares, verbatim prefixes) are copied verbatim. No trailing
    ``/`` is emitted unless the path is a root.

    Args:
        path: Native path, as a string or path-like object
        flavour: Flavour name or instance; defaults to the active flavour

    Returns:
        Slash path string

    Raises:
        EncodingError: If any component is not valid Unicode text

    Examples:
        >>> to_slash(PureWindowsPath(r"C:\\foo\\bar"), flavour="windows")
        "C:/foo/bar"
        >>> to_slash(PurePosixPath("foo/bar/piyo.txt"), flavour="posix")
        "foo/bar/piyo.txt"
    """
    return get_flavour(flavour).to_slash(path)
