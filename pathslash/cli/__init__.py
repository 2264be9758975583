"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from pathslash.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from pathslash.utils.get_package_version import get_package_version

        print(f"pathslash {get_package_version()}")
        return 0

    app = _create_app()
    try:
        # Exit codes come back as the return value outside standalone mode
        result = app(argv, standalone_mode=False)
    except click.exceptions.Abort:
        return 1
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return result if isinstance(result, int) else 0
