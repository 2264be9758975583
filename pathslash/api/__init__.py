"""pathslash conversion API.

Each module exports exactly one function that delegates to the active
(or explicitly requested) ``SlashFlavour``.
"""

from .cow_from_backslash import cow_from_backslash
from .cow_from_backslash_lossy import cow_from_backslash_lossy
from .cow_from_slash import cow_from_slash
from .cow_from_slash_lossy import cow_from_slash_lossy
from .from_backslash import from_backslash
from .from_backslash_lossy import from_backslash_lossy
from .from_slash import from_slash
from .from_slash_lossy import from_slash_lossy
from .split_components import split_components
from .to_slash import to_slash
from .to_slash_cow import to_slash_cow
from .to_slash_lossy import to_slash_lossy
from .to_slash_lossy_cow import to_slash_lossy_cow

__all__ = [
    "cow_from_backslash",
    "cow_from_backslash_lossy",
    "cow_from_slash",
    "cow_from_slash_lossy",
    "from_backslash",
    "from_backslash_lossy",
    "from_slash",
    "from_slash_lossy",
    "split_components",
    "to_slash",
    "to_slash_cow",
    "to_slash_lossy",
    "to_slash_lossy_cow",
]
