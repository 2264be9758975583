from enum import Enum


class ComponentKind(Enum):
    """Structural role of one native path component."""

    PREFIX = "prefix"  # drive letter, UNC share, or verbatim variant
    ROOT = "root"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"
