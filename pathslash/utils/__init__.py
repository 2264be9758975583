"""pathslash utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .coerce_raw_text import coerce_raw_text
from .configure_logging import configure_logging
from .ensure_unicode import ensure_unicode
from .get_logger import get_logger
from .get_package_version import get_package_version
from .replace_invalid_unicode import replace_invalid_unicode
from .translate_separators import translate_separators

__all__ = [
    "coerce_raw_text",
    "configure_logging",
    "ensure_unicode",
    "get_logger",
    "get_package_version",
    "replace_invalid_unicode",
    "translate_separators",
]
