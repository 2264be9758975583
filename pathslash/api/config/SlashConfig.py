"""pathslash configuration."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import ENV_FLAVOUR, ENV_LOG_LEVEL
from .SlashConfigError import SlashConfigError

_ENV_VARS = {"flavour": ENV_FLAVOUR, "log_level": ENV_LOG_LEVEL}


class SlashConfig(BaseModel):
    """Settings that select the conversion flavour and log verbosity."""

    model_config = ConfigDict(extra="forbid")

    flavour: Literal["auto", "posix", "windows"] = Field(
        "auto", description="Path flavour; 'auto' follows the host's native separator"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Logging level")

    @classmethod
    def load(cls) -> "SlashConfig":
        """Load and validate config from the environment.

        Reads PATHSLASH_FLAVOUR and PATHSLASH_LOG_LEVEL. Unset or empty
        variables fall back to the defaults.

        Raises:
            SlashConfigError: If a variable holds an unsupported value
        """
        raw: dict[str, str] = {}
        flavour = os.environ.get(ENV_FLAVOUR, "").strip()
        if flavour:
            raw["flavour"] = flavour.lower()
        log_level = os.environ.get(ENV_LOG_LEVEL, "").strip()
        if log_level:
            raw["log_level"] = log_level.upper()

        try:
            return cls(**raw)
        except ValidationError as e:
            errors = []
            variables = []
            for error in e.errors():
                loc = error.get("loc", ())
                field = str(loc[0]) if loc else ""
                msg = error.get("msg", str(e))
                env_var = _ENV_VARS.get(field)
                if env_var is None:
                    errors.append(f"{field}: {msg}" if field else msg)
                    continue
                variables.append(env_var)
                errors.append(f"{env_var}={os.environ.get(env_var, '')!r}: {msg}")
            raise SlashConfigError(errors, variables) from e
