"""Terminal I/O components for menu loops."""

from numenu.cli.ui.base import TerminalIO
from numenu.cli.ui.panels import console, err_console, render_tree
from numenu.cli.ui.terminal import RichTerminal, get_terminal, parse_choice

__all__ = [
    "TerminalIO",
    "RichTerminal",
    "console",
    "err_console",
    "get_terminal",
    "parse_choice",
    "render_tree",
]
