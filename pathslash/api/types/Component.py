from dataclasses import dataclass

from .ComponentKind import ComponentKind


@dataclass(frozen=True)
class Component:
    """One structural component of a native path.

    ``text`` is the component's native text. For ``PREFIX`` it is opaque
    platform text (e.g. ``\\\\server\\share``) and may contain native
    separators that must be passed through untouched.
    """

    kind: ComponentKind
    text: str

    def __str__(self):
        return self.text
