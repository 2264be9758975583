"""Copy-on-write conversion result."""

import os
from typing import Generic, TypeVar

T = TypeVar("T")


class Cow(Generic[T]):
    """Result of a conversion that may reuse the caller's input.

    Concrete results are either ``Borrowed`` (no character was rewritten, the
    caller's input object is kept as ``source``) or ``Owned`` (a new value was
    built). Both compare equal to, and hash like, their ``value``, so a cow is
    interchangeable with what the copying variant returns.
    """

    value: T
    is_borrowed: bool = False

    def into_owned(self) -> T:
        """Return the converted value."""
        return self.value

    def __eq__(self, other):
        if isinstance(other, Cow):
            other = other.value
        return self.value == other

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return str(self.value)

    def __fspath__(self):
        return os.fspath(self.value)
