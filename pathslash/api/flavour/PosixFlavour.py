"""Separator-identical flavour: native separator is already ``/``."""

import os
from pathlib import PurePosixPath

from ...constants import SLASH
from ...utils.ensure_unicode import ensure_unicode
from ...utils.replace_invalid_unicode import replace_invalid_unicode
from ..types.Borrowed import Borrowed
from ..types.Cow import Cow
from ..types.Owned import Owned
from .SlashFlavour import SlashFlavour


class PosixFlavour(SlashFlavour):
    """Flavour for POSIX paths, where encoding is plain text extraction.

    The caller's text is returned exactly as given: ``./foo`` stays
    ``./foo``. Only a ``PurePosixPath`` value carries ``pathlib``'s own
    normalized rendering.
    """

    name = "posix"
    sep = SLASH
    path_type = PurePosixPath

    def to_slash(self, path: str | os.PathLike) -> str:
        return ensure_unicode(os.fspath(path))

    def to_slash_lossy(self, path: str | os.PathLike) -> str:
        return replace_invalid_unicode(os.fspath(path))

    def to_slash_cow(self, path: str | os.PathLike) -> Cow[str]:
        return self._wrap_text(path, self.to_slash(path))

    def to_slash_lossy_cow(self, path: str | os.PathLike) -> Cow[str]:
        return self._wrap_text(path, self.to_slash_lossy(path))

    def _wrap_text(self, source: str | os.PathLike, slash: str) -> Cow[str]:
        if slash == os.fspath(source):
            return Borrowed(source, slash)
        return Owned(slash)
