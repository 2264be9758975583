"""Select the conversion flavour, once, from configuration."""

import os

from ...constants import BACKSLASH
from ...utils.get_logger import get_logger
from ..config.SlashConfig import SlashConfig
from .PosixFlavour import PosixFlavour
from .SlashFlavour import SlashFlavour
from .WindowsFlavour import WindowsFlavour

logger = get_logger("flavour")

_FLAVOURS: dict[str, SlashFlavour] = {
    "posix": PosixFlavour(),
    "windows": WindowsFlavour(),
}

# Active flavour - resolved on first use
_ACTIVE: SlashFlavour | None = None


def native_flavour_name() -> str:
    """Name of the flavour matching the host's native separator."""
    return "windows" if os.sep == BACKSLASH else "posix"


def get_flavour(flavour: str | SlashFlavour | None = None) -> SlashFlavour:
    """Resolve a flavour argument to a ``SlashFlavour`` instance.

    Args:
        flavour: ``None`` for the active flavour, a name (``"auto"``,
            ``"posix"``, ``"windows"``), or a ``SlashFlavour`` returned as-is

    Returns:
        The flavour instance

    Raises:
        TypeError: If ``flavour`` is neither a name nor a ``SlashFlavour``
        ValueError: If the name is not a known flavour
        SlashConfigError: If the active flavour is requested and the
            environment configuration is invalid
    """
    if isinstance(flavour, SlashFlavour):
        return flavour
    if flavour is None:
        return _active_flavour()
    if not isinstance(flavour, str):
        raise TypeError(f"Path flavour must be a name or SlashFlavour, not {type(flavour).__name__}")

    name = flavour.strip().lower()
    if name == "auto":
        name = native_flavour_name()
    try:
        return _FLAVOURS[name]
    except KeyError:
        raise ValueError(f"Unknown path flavour {flavour!r} (expected one of: auto, posix, windows)") from None


def reset_flavour() -> None:
    """Forget the active flavour so the next use re-reads configuration."""
    global _ACTIVE
    _ACTIVE = None


def _active_flavour() -> SlashFlavour:
    global _ACTIVE
    if _ACTIVE is None:
        config = SlashConfig.load()
        _ACTIVE = get_flavour(config.flavour)
        logger.debug("Selected %s path flavour (configured as %r)", _ACTIVE.name, config.flavour)
    return _ACTIVE
