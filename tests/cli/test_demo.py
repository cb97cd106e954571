"""Tests for the bundled demo menu."""

from numenu.cli.demo import build_demo_menu
from numenu.core.menu import Menu


def test_demo_structure(terminal):
    root = build_demo_menu(terminal=terminal)

    assert root.is_root
    assert [child.get_title() for child in root.children] == [
        "Say hello",
        "Arithmetic",
        "About",
    ]
    assert all(node.terminal is terminal for _, node in root.walk())


def test_demo_arithmetic(terminal, quiet_settings):
    root = build_demo_menu(terminal=terminal, settings=quiet_settings)
    terminal.feed(2, 1, 2, 0, 0)

    assert root.execute() is False
    assert "2 + 3 = 5" in terminal.lines
    assert "6 x 7 = 42" in terminal.lines


def test_demo_division_error_is_reported(terminal, quiet_settings):
    root = build_demo_menu(terminal=terminal, settings=quiet_settings)
    terminal.feed(2, 3, 0, 0)

    assert root.execute() is False
    assert terminal.errors == ["division by zero"]


def test_demo_outline(terminal, quiet_settings):
    root = build_demo_menu(terminal=terminal, settings=quiet_settings)
    terminal.feed(3, 2, 0, 0)

    root.execute()

    assert "numenu demo" in terminal.lines
    assert "  Arithmetic" in terminal.lines
    assert "    Divide 1 by 0" in terminal.lines


def test_demo_placeholder_is_noop(terminal):
    root = build_demo_menu(terminal=terminal)
    about = root.children[2]
    assert isinstance(about, Menu)

    placeholder = about.children[2]

    assert placeholder.execute() is True
    assert terminal.pauses == []
