"""Menu tree nodes: the abstract node and the action leaf."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

from numenu.core.results import ActionResult, Err, Ok
from numenu.utils.config import MenuSettings
from numenu.utils.debug import debug_action

if TYPE_CHECKING:
    from numenu.cli.ui.base import TerminalIO
    from numenu.core.menu import Menu

Action = Callable[[], None]


class MenuNode(ABC):
    """A titled, executable node in a menu tree.

    ``execute()`` returns True when the node's effect completed and
    False when the caller should treat it as a navigational exit.
    """

    def __init__(
        self,
        title: str,
        *,
        terminal: Optional["TerminalIO"] = None,
        settings: Optional[MenuSettings] = None,
    ):
        if not isinstance(title, str):
            raise TypeError(f"title must be a str, got {type(title).__name__}")
        self._title = title
        self._terminal = terminal
        self._settings = settings or MenuSettings()
        self._parent: Optional["Menu"] = None

    @property
    def title(self) -> str:
        return self._title

    def get_title(self) -> str:
        """Return the display title."""
        return self._title

    @property
    def settings(self) -> MenuSettings:
        """Presentation settings, fixed at construction."""
        return self._settings

    @property
    def parent(self) -> Optional["Menu"]:
        """Menu this node was added to, or None for a root."""
        return self._parent

    @property
    def terminal(self) -> "TerminalIO":
        """Terminal this node reads from and writes to."""
        if self._terminal is None:
            from numenu.cli.ui.terminal import get_terminal

            self._terminal = get_terminal()
        return self._terminal

    @abstractmethod
    def execute(self) -> bool:
        """Run the node."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._title!r})"


class ActionLeaf(MenuNode):
    """Leaf node that runs a callable when selected.

    Errors raised by the callable are reported on the terminal's error
    channel and never reach the menu loop.
    """

    def __init__(
        self,
        title: str,
        action: Optional[Action] = None,
        *,
        terminal: Optional["TerminalIO"] = None,
        settings: Optional[MenuSettings] = None,
    ):
        super().__init__(title, terminal=terminal, settings=settings)
        if action is not None and not callable(action):
            raise TypeError(f"action for {title!r} is not callable")
        self._action = action

    @property
    def action(self) -> Optional[Action]:
        return self._action

    def invoke(self) -> ActionResult:
        """Call the action once and describe how it went.

        Returns:
            Ok if the action returned (or there is none), Err otherwise
        """
        if self._action is None:
            return Ok()
        try:
            self._action()
        except Exception as e:
            return Err.from_exception(e)
        return Ok()

    def execute(self) -> bool:
        if self._action is None:
            debug_action("No action bound", title=self._title)
            return True

        result = self.invoke()
        if isinstance(result, Err):
            debug_action("Action failed", title=self._title, error=result.message)
            self.terminal.write_error(result.message)
            if self.settings.pause_after_error:
                self.terminal.pause(self.settings.error_pause_message)
        else:
            debug_action("Action completed", title=self._title)
            if self.settings.pause_after_action:
                self.terminal.pause(self.settings.pause_message)
        return True
