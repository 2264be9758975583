from dataclasses import dataclass
from typing import Any

from .Cow import Cow, T


@dataclass(frozen=True, eq=False)
class Borrowed(Cow[T]):
    """Conversion result backed by the caller's input.

    ``source`` is the very object the caller passed in; no text was rewritten
    to produce ``value``.
    """

    source: Any
    value: T
    is_borrowed = True

    def __repr__(self):
        return f"Borrowed({self.value!r})"
