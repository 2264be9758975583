"""Decompose a pure path into structural components."""

from collections.abc import Iterator
from pathlib import PurePath

from ..constants import CUR_DIR, PARENT_DIR
from .types.Component import Component
from .types.ComponentKind import ComponentKind


def split_components(path: PurePath) -> Iterator[Component]:
    """Yield the structural components of ``path`` in order.

    The prefix (``path.drive``) comes first, then the root, then one component
    per remaining part. A path with no anchor and no parts is the current
    directory and yields a single ``CUR_DIR``. ``pathlib`` has already
    collapsed redundant separators and ``.`` segments; ``..`` is kept.

    Examples:
        >>> [c.kind.name for c in split_components(PureWindowsPath(r"C:\\foo\\.."))]
        ['PREFIX', 'ROOT', 'NORMAL', 'PARENT_DIR']
        >>> [c.kind.name for c in split_components(PurePosixPath(""))]
        ['CUR_DIR']
    """
    if path.drive:
        yield Component(ComponentKind.PREFIX, path.drive)
    if path.root:
        yield Component(ComponentKind.ROOT, path.root)

    parts = path.parts[1:] if path.anchor else path.parts
    if not path.anchor and not parts:
        yield Component(ComponentKind.CUR_DIR, CUR_DIR)
    for part in parts:
        if part == PARENT_DIR:
            yield Component(ComponentKind.PARENT_DIR, part)
        else:
            yield Component(ComponentKind.NORMAL, part)
