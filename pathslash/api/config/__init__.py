"""Configuration for pathslash."""

from .SlashConfig import SlashConfig
from .SlashConfigError import SlashConfigError

__all__ = ["SlashConfig", "SlashConfigError"]
