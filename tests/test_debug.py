"""Tests for debug logging."""

from numenu.core.menu import Menu
from numenu.utils.debug import debug, debug_menu, is_debug_enabled


def test_debug_disabled_by_default(capsys):
    debug("menu", "hidden")

    assert capsys.readouterr().err == ""
    assert is_debug_enabled() is False


def test_debug_enabled_writes_stderr(monkeypatch, capsys):
    monkeypatch.setenv("NUMENU_DEBUG", "1")

    debug_menu("Rendered", menu="Main", items=3)

    err = capsys.readouterr().err
    assert "[numenu:menu]" in err
    assert "Rendered | menu=Main items=3" in err


def test_debug_invalid_value_disables(monkeypatch):
    monkeypatch.setenv("NUMENU_DEBUG", "loud")

    assert is_debug_enabled() is False


def test_debug_appends_to_log_file(monkeypatch, tmp_path, capsys):
    log_file = tmp_path / "numenu.log"
    monkeypatch.setenv("NUMENU_DEBUG", "true")
    monkeypatch.setenv("NUMENU_DEBUG_LOG", str(log_file))

    debug("tree", "first")
    debug("tree", "second")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[numenu:tree]")
    assert lines[1].endswith("second")


def test_debug_log_file_errors_are_ignored(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("NUMENU_DEBUG", "1")
    monkeypatch.setenv("NUMENU_DEBUG_LOG", str(tmp_path / "missing" / "x.log"))

    debug("menu", "still printed")

    assert "still printed" in capsys.readouterr().err


def test_menu_loop_traces_activity(monkeypatch, capsys, terminal, quiet_settings):
    monkeypatch.setenv("NUMENU_DEBUG", "1")
    menu = Menu("Traced", terminal=terminal, settings=quiet_settings)
    menu.add_action("Go", lambda: None)
    terminal.feed(1, 5, 0)

    menu.execute()

    err = capsys.readouterr().err
    assert "[numenu:tree]" in err
    assert "[numenu:dispatch] " in err
    assert "Invalid choice | menu=Traced choice=5" in err
    assert "Leaving menu | menu=Traced root=False" in err


def test_debug_ignores_closed_stderr(monkeypatch, terminal):
    """A closed stderr must not stop a tree from being built."""

    class ClosedPipe:
        def write(self, text):
            raise BrokenPipeError(32, "Broken pipe")

        def flush(self):
            raise BrokenPipeError(32, "Broken pipe")

    monkeypatch.setenv("NUMENU_DEBUG", "1")
    monkeypatch.setattr("sys.stderr", ClosedPipe())
    menu = Menu("Piped", terminal=terminal)

    leaf = menu.add_action("A", lambda: None)

    assert menu.children == (leaf,)


def test_debug_log_file_is_utf8(monkeypatch, tmp_path, capsys):
    log_file = tmp_path / "numenu.log"
    monkeypatch.setenv("NUMENU_DEBUG", "1")
    monkeypatch.setenv("NUMENU_DEBUG_LOG", str(log_file))

    debug("tree", "Added item", item="Café ☕")

    assert "Café ☕" in log_file.read_text(encoding="utf-8")
