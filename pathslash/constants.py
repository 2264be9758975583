"""Shared constants for separators, replacement text and environment keys."""

SLASH = "/"
BACKSLASH = "\\"

# Substituted for every unit that cannot be represented as Unicode text
REPLACEMENT_CHARACTER = "\ufffd"

CUR_DIR = "."
PARENT_DIR = ".."

ENV_FLAVOUR = "PATHSLASH_FLAVOUR"
ENV_LOG_LEVEL = "PATHSLASH_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
