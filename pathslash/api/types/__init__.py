"""Value types for native path components and copy-on-write results."""

from .Borrowed import Borrowed
from .Component import Component
from .ComponentKind import ComponentKind
from .Cow import Cow
from .Owned import Owned

__all__ = ["Borrowed", "Component", "ComponentKind", "Cow", "Owned"]
