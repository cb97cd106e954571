"""Demo menu tree bundled with the CLI."""

from typing import Optional

from numenu.cli.ui.base import TerminalIO
from numenu.core.menu import Menu
from numenu.utils.config import MenuSettings


def say(terminal: TerminalIO, text: str) -> None:
    terminal.write_line(text)


def show_sum(terminal: TerminalIO, a: int, b: int) -> None:
    terminal.write_line(f"{a} + {b} = {a + b}")


def show_product(terminal: TerminalIO, a: int, b: int) -> None:
    terminal.write_line(f"{a} x {b} = {a * b}")


def show_quotient(terminal: TerminalIO, a: int, b: int) -> None:
    # Raises ZeroDivisionError for b == 0, which the menu reports
    terminal.write_line(f"{a} / {b} = {a / b}")


def show_outline(terminal: TerminalIO, menu: Menu) -> None:
    """Print the tree below ``menu`` as indented titles."""
    for depth, node in menu.walk():
        terminal.write_line(f"{'  ' * depth}{node.get_title()}")


def show_version(terminal: TerminalIO) -> None:
    from numenu import __version__

    terminal.write_line(f"numenu {__version__}")


def build_demo_menu(
    terminal: Optional[TerminalIO] = None,
    settings: Optional[MenuSettings] = None,
) -> Menu:
    """Build the demo tree.

    Args:
        terminal: Terminal for every node (default: process terminal)
        settings: Presentation settings shared by every node

    Returns:
        Root menu, ready for ``execute()``
    """
    root = Menu("numenu demo", is_root=True, terminal=terminal, settings=settings)
    io = root.terminal

    root.add_action("Say hello", say, io, "Hello from numenu!")

    arithmetic = root.sub_menu("Arithmetic")
    arithmetic.add_action("Add 2 + 3", show_sum, io, 2, 3)
    arithmetic.add_action("Multiply 6 x 7", show_product, io, 6, 7)
    arithmetic.add_action("Divide 1 by 0", show_quotient, io, 1, 0)

    about = root.sub_menu("About")
    about.add_action("Show version", show_version, io)
    about.add_action("Show menu outline", show_outline, io, root)
    about.add_action("Placeholder", None)

    return root
