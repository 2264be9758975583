"""Slash configuration error."""


class SlashConfigError(Exception):
    """Raised when a ``PATHSLASH_*`` environment variable holds an unsupported value.

    ``variables`` names the environment variables that failed, so the
    message points at what to fix.
    """

    def __init__(self, errors: list[str] | str, variables: list[str] | None = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        self.variables = variables or []
        header = "pathslash configuration validation failed"
        if self.variables:
            header += f" (check {', '.join(self.variables)})"
        super().__init__(header + ":\n" + "\n".join(f"  - {e}" for e in errors))
