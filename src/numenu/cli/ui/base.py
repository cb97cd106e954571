"""Base protocol for terminal I/O."""

from typing import Protocol

from numenu.utils.constants import INVALID_INPUT_MESSAGE, PAUSE_MESSAGE


class TerminalIO(Protocol):
    """Protocol for the terminal a menu loop talks to.

    Allows swapping the console backend, e.g. for a scripted terminal
    in tests.
    """

    def clear_screen(self) -> None:
        """Clear the visible terminal."""
        ...

    def write_line(self, text: str = "") -> None:
        """Write one line of plain text to standard output."""
        ...

    def write_error(self, message: str) -> None:
        """Write one line to the error channel."""
        ...

    def read_line(self, prompt: str) -> str:
        """Show prompt and read one line. Raises EOFError at end of input."""
        ...

    def read_integer(
        self, prompt: str, error_message: str = INVALID_INPUT_MESSAGE
    ) -> int:
        """Read lines until one parses as an integer, reporting each failure."""
        ...

    def pause(self, message: str = PAUSE_MESSAGE) -> None:
        """Drop pending input, then wait for Enter."""
        ...
