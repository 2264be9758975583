from dataclasses import dataclass

from .Cow import Cow, T


@dataclass(frozen=True, eq=False)
class Owned(Cow[T]):
    """Conversion result built from freshly rewritten text."""

    value: T
    is_borrowed = False

    def __repr__(self):
        return f"Owned({self.value!r})"
