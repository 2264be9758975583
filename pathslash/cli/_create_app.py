"""Create the main Typer CLI app."""

import typer

from pathslash.api.config.SlashConfig import SlashConfig
from pathslash.api.config.SlashConfigError import SlashConfigError
from pathslash.api.flavour.get_flavour import get_flavour
from pathslash.api.flavour.SlashFlavour import SlashFlavour
from pathslash.EncodingError import EncodingError
from pathslash.utils.configure_logging import configure_logging
from pathslash.utils.replace_invalid_unicode import replace_invalid_unicode

_FLAVOUR_HELP = "Path flavour: auto, posix or windows (default: PATHSLASH_FLAVOUR or auto)"


def _resolve_flavour(name: str | None) -> SlashFlavour:
    try:
        return get_flavour(name)
    except (ValueError, SlashConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Convert file paths to and from slash paths",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    ) -> None:
        try:
            config = SlashConfig.load()
        except SlashConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2) from e
        configure_logging("DEBUG" if verbose else config.log_level)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="to-slash")
    def to_slash_cmd(
        path: str = typer.Argument(..., help="Native path to convert"),
        lossy: bool = typer.Option(False, "--lossy", help="Replace non-Unicode units with U+FFFD instead of failing"),
        flavour: str | None = typer.Option(None, "--flavour", "-f", help=_FLAVOUR_HELP),
    ) -> None:
        """Print the slash path for a native path."""
        slash_flavour = _resolve_flavour(flavour)
        if lossy:
            typer.echo(slash_flavour.to_slash_lossy(path))
            return
        try:
            typer.echo(slash_flavour.to_slash(path))
        except EncodingError as e:
            typer.echo(f"Error: {e}. Retry with --lossy to substitute U+FFFD.", err=True)
            raise typer.Exit(1) from e

    @app.command(name="from-slash")
    def from_slash_cmd(
        text: str = typer.Argument(..., help="Slash path to convert"),
        flavour: str | None = typer.Option(None, "--flavour", "-f", help=_FLAVOUR_HELP),
    ) -> None:
        """Print the native path for a slash path."""
        # Command-line arguments are raw platform text
        typer.echo(str(_resolve_flavour(flavour).from_slash_lossy(text)))

    @app.command(name="from-backslash")
    def from_backslash_cmd(
        text: str = typer.Argument(..., help="Backslash-delimited path to convert"),
        flavour: str | None = typer.Option(None, "--flavour", "-f", help=_FLAVOUR_HELP),
    ) -> None:
        """Print the native path for a backslash-delimited path."""
        typer.echo(str(_resolve_flavour(flavour).from_backslash_lossy(text)))

    @app.command(name="components")
    def components_cmd(
        path: str = typer.Argument(..., help="Native path to decompose"),
        flavour: str | None = typer.Option(None, "--flavour", "-f", help=_FLAVOUR_HELP),
    ) -> None:
        """Print one KIND<TAB>text line per path component."""
        for component in _resolve_flavour(flavour).components(path):
            typer.echo(f"{component.kind.name}\t{replace_invalid_unicode(component.text)}")

    return app
