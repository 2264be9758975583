"""Separator-divergent flavour: native separator is ``\\``."""

import os
from collections.abc import Callable
from pathlib import PurePath, PureWindowsPath

from ...constants import BACKSLASH, CUR_DIR, PARENT_DIR, SLASH
from ...utils.ensure_unicode import ensure_unicode
from ...utils.replace_invalid_unicode import replace_invalid_unicode
from ..split_components import split_components
from ..types.ComponentKind import ComponentKind
from .SlashFlavour import SlashFlavour


class WindowsFlavour(SlashFlavour):
    """Flavour for Windows paths.

    Encoding walks the path's components rather than rewriting characters,
    so that prefixes such as ``\\\\server\\share`` or ``\\\\?\\C:`` keep their
    own backslashes while the separators between components become ``/``.
    """

    name = "windows"
    sep = BACKSLASH
    path_type = PureWindowsPath

    def to_slash(self, path: str | os.PathLike) -> str:
        return self._encode(self.path(path), ensure_unicode)

    def to_slash_lossy(self, path: str | os.PathLike) -> str:
        return self._encode(self.path(path), replace_invalid_unicode)

    def _encode(self, path: PurePath, convert: Callable[[str], str]) -> str:
        buf = []
        for component in split_components(path):
            kind = component.kind
            if kind is ComponentKind.PREFIX:
                buf.append(convert(component.text))
                # C:\foo is [PREFIX, ROOT, NORMAL]; avoid C://foo
                continue
            if kind is ComponentKind.CUR_DIR:
                buf.append(CUR_DIR)
            elif kind is ComponentKind.PARENT_DIR:
                buf.append(PARENT_DIR)
            elif kind is ComponentKind.NORMAL:
                buf.append(convert(component.text))
            # ROOT contributes only the separator
            buf.append(SLASH)

        slash = "".join(buf)
        if slash != SLASH and slash.endswith(SLASH) and not self._is_drive_root(path):
            slash = slash[:-1]
        return slash

    def _is_drive_root(self, path: PurePath) -> bool:
        """True for a bare anchor like ``C:\\`` whose prefix does not imply the root.

        UNC prefixes are always rooted, so ``\\\\server\\share`` needs no
        trailing ``/``; ``C:`` alone is drive-relative and does.
        """
        if not (path.drive and path.root) or len(path.parts) > 1:
            return False
        return not self.path_type(path.drive).root
