"""CLI entry point for numenu.

Uses Typer for command routing with lazy loading, so `--help` and
`--version` do not build any menus.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="numenu",
    help="Numbered console menus",
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from numenu import __version__

        typer.echo(f"numenu {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Run the demo menu if no command given."""
    if ctx.invoked_subcommand is None:
        from numenu.cli.commands import cmd_demo

        cmd_demo()


@app.command()
def demo(
    no_pause: bool = typer.Option(
        False, "--no-pause", help="Never wait for Enter after actions"
    ),
    inline_retry: bool = typer.Option(
        False,
        "--inline-retry",
        help="Re-prompt in place on non-numeric input instead of redrawing",
    ),
) -> None:
    """Run the demo menu."""
    from numenu.cli.commands import cmd_demo

    cmd_demo(no_pause=no_pause, inline_retry=inline_retry)


@app.command()
def tree() -> None:
    """Show the demo menu structure."""
    from numenu.cli.commands import cmd_tree

    cmd_tree()


@app.command()
def settings() -> None:
    """Show presentation toggles (set with NUMENU_<NAME>=on/off)."""
    from numenu.cli.commands import cmd_settings

    cmd_settings()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
