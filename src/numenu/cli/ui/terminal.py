"""Console-backed terminal I/O for menu loops."""

import re
import sys
from typing import Optional, TextIO

from rich.console import Console

from numenu.cli.ui.panels import console as default_console
from numenu.cli.ui.panels import err_console as default_err_console
from numenu.utils.constants import INVALID_INPUT_MESSAGE, PAUSE_MESSAGE

_CHOICE_RE = re.compile(r"^[+-]?\d+$")

_terminal = None


def parse_choice(text: str) -> Optional[int]:
    """Parse a typed choice.

    Surrounding whitespace and a leading sign are accepted; anything
    else (``"2abc"``, ``"1.5"``, empty input) is malformed.

    Returns:
        The integer, or None if the text is malformed
    """
    stripped = text.strip()
    if not _CHOICE_RE.match(stripped):
        return None
    return int(stripped)


class RichTerminal:
    """TerminalIO implementation on top of Rich consoles.

    Menu text goes to ``console``, action errors to ``err_console``.
    Text is never interpreted as Rich markup, so titles containing
    square brackets print as typed.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
    ):
        """Create a terminal.

        Args:
            console: Console for menu output (default: shared stdout console)
            err_console: Console for errors (default: shared stderr console)
            stdin: Stream to read from instead of the process stdin
        """
        self.console = console or default_console
        self.err_console = err_console or default_err_console
        self._stdin = stdin

    def clear_screen(self) -> None:
        # Rich skips the escape sequence when output is not a terminal
        self.console.clear()

    def write_line(self, text: str = "") -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False)

    def write_error(self, message: str) -> None:
        self.err_console.print(
            message, style="red", markup=False, emoji=False, highlight=False
        )

    def read_line(self, prompt: str) -> str:
        line = self.console.input(
            prompt, markup=False, emoji=False, stream=self._stdin
        )
        # readline() signals end of input with an empty string
        if self._stdin is not None and not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_integer(
        self, prompt: str, error_message: str = INVALID_INPUT_MESSAGE
    ) -> int:
        while True:
            choice = parse_choice(self.read_line(prompt))
            if choice is not None:
                return choice
            self.write_line(error_message)

    def pause(self, message: str = PAUSE_MESSAGE) -> None:
        self._discard_pending_input()
        try:
            self.read_line(f"\n{message}")
        except EOFError:
            self.write_line()

    def _discard_pending_input(self) -> None:
        """Drop keystrokes typed ahead so they cannot satisfy the pause."""
        if self._stdin is not None or not sys.stdin.isatty():
            return

        if sys.platform == "win32":
            import msvcrt

            while msvcrt.kbhit():
                msvcrt.getwch()
        else:
            import termios

            try:
                termios.tcflush(sys.stdin, termios.TCIFLUSH)
            except termios.error:
                pass


def get_terminal() -> RichTerminal:
    """Get the process-wide terminal, creating it on first use."""
    global _terminal
    if _terminal is None:
        _terminal = RichTerminal()
    return _terminal
