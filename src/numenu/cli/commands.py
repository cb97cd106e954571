"""CLI command handlers."""

import sys
from dataclasses import replace

from rich.markup import escape

from numenu.cli.demo import build_demo_menu
from numenu.cli.ui import console, err_console, render_tree
from numenu.utils.config import MenuSettings
from numenu.utils.constants import INTERRUPTED_EXIT_CODE
from numenu.utils.exceptions import ConfigurationError


def _load_settings() -> MenuSettings:
    """Settings from NUMENU_* variables; exits on a bad value."""
    try:
        return MenuSettings.from_env()
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(2)


def cmd_demo(no_pause: bool = False, inline_retry: bool = False):
    """Run the demo menu until the user exits it."""
    settings = _load_settings()
    if no_pause:
        settings = settings.without_pauses()
    if inline_retry:
        settings = replace(settings, rerender_on_invalid_input=False)

    root = build_demo_menu(settings=settings)
    try:
        root.execute()
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        sys.exit(INTERRUPTED_EXIT_CODE)

    # The root's "0. Exit" ends the program
    console.print("Goodbye.")


def cmd_tree():
    """Print the demo menu structure."""
    console.print(render_tree(build_demo_menu()))


def cmd_settings():
    """Show presentation toggles and their current values."""
    settings = _load_settings()
    for attr, desc, enabled in settings.get_toggles():
        state = "[green]on[/green]" if enabled else "[dim]off[/dim]"
        console.print(f"{state}  [bold]{attr}[/bold] [dim]{desc}[/dim]")
