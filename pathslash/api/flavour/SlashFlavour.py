"""Base strategy for converting between native paths and slash paths."""

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import PurePath

from ...constants import BACKSLASH, SLASH
from ...utils.coerce_raw_text import coerce_raw_text
from ...utils.translate_separators import translate_separators
from ..split_components import split_components
from ..types.Borrowed import Borrowed
from ..types.Component import Component
from ..types.Cow import Cow
from ..types.Owned import Owned


class SlashFlavour(ABC):
    """Conversion strategy for one native separator convention.

    Subclasses fix the native separator and pure path type and implement the
    encoder. Decoding is the same character rewrite for every flavour: only
    the separator it rewrites into differs, so a separator that already is
    native is never touched.
    """

    name: str
    sep: str
    path_type: type[PurePath]

    def path(self, path: str | os.PathLike) -> PurePath:
        """Coerce ``path`` into this flavour's pure path type."""
        if isinstance(path, self.path_type):
            return path
        return self.path_type(os.fspath(path))

    def components(self, path: str | os.PathLike) -> Iterator[Component]:
        """Yield the structural components of ``path`` under this flavour."""
        return split_components(self.path(path))

    # Encoder

    @abstractmethod
    def to_slash(self, path: str | os.PathLike) -> str:
        """Encode ``path`` as a slash path.

        Raises:
            EncodingError: If any component is not valid Unicode text
        """

    @abstractmethod
    def to_slash_lossy(self, path: str | os.PathLike) -> str:
        """Encode ``path`` as a slash path, substituting U+FFFD for invalid units."""

    def to_slash_cow(self, path: str | os.PathLike) -> Cow[str]:
        return Owned(self.to_slash(path))

    def to_slash_lossy_cow(self, path: str | os.PathLike) -> Cow[str]:
        return Owned(self.to_slash_lossy(path))

    # Decoder

    def from_slash(self, text: str) -> PurePath:
        """Decode a ``/``-delimited path into a native path."""
        return self.path_type(translate_separators(text, SLASH, self.sep))

    def from_slash_lossy(self, raw: str | bytes | os.PathLike) -> PurePath:
        """Decode raw platform text, replacing invalid units with U+FFFD first."""
        return self.from_slash(coerce_raw_text(raw))

    def from_backslash(self, text: str) -> PurePath:
        """Decode a ``\\``-delimited path into a native path."""
        return self.path_type(translate_separators(text, BACKSLASH, self.sep))

    def from_backslash_lossy(self, raw: str | bytes | os.PathLike) -> PurePath:
        return self.from_backslash(coerce_raw_text(raw))

    def cow_from_slash(self, text: str) -> Cow[PurePath]:
        return self._wrap(text, translate_separators(text, SLASH, self.sep))

    def cow_from_slash_lossy(self, raw: str | bytes | os.PathLike) -> Cow[PurePath]:
        return self._wrap(raw, translate_separators(coerce_raw_text(raw), SLASH, self.sep))

    def cow_from_backslash(self, text: str) -> Cow[PurePath]:
        return self._wrap(text, translate_separators(text, BACKSLASH, self.sep))

    def cow_from_backslash_lossy(self, raw: str | bytes | os.PathLike) -> Cow[PurePath]:
        return self._wrap(raw, translate_separators(coerce_raw_text(raw), BACKSLASH, self.sep))

    def _wrap(self, source: object, text: str) -> Cow[PurePath]:
        path = self.path_type(text)
        if text is source:
            return Borrowed(source, path)
        return Owned(path)

    def __repr__(self):
        return f"{type(self).__name__}()"
