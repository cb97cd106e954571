"""Composite menu node and its interactive loop."""

from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional

from numenu.core.node import ActionLeaf, MenuNode
from numenu.utils.config import MenuSettings
from numenu.utils.constants import BACK_CHOICE
from numenu.utils.debug import debug_dispatch, debug_menu, debug_tree
from numenu.utils.exceptions import MenuStructureError

if TYPE_CHECKING:
    from numenu.cli.ui.base import TerminalIO


class MenuState(Enum):
    """Where a menu loop currently is."""

    RUNNING = "running"
    DISPATCHING = "dispatching"
    EXITING = "exiting"


class Menu(MenuNode):
    """A node holding an ordered list of children.

    Executing a menu shows its children numbered from 1 and runs the
    selected one, until the user picks 0. Children are shown in the
    order they were added.
    """

    def __init__(
        self,
        title: str,
        is_root: bool = False,
        *,
        terminal: Optional["TerminalIO"] = None,
        settings: Optional[MenuSettings] = None,
    ):
        super().__init__(title, terminal=terminal, settings=settings)
        self._is_root = bool(is_root)
        self._children: list[MenuNode] = []
        self.state = MenuState.RUNNING

    @property
    def is_root(self) -> bool:
        return self._is_root

    @property
    def children(self) -> tuple[MenuNode, ...]:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def add_item(self, item: MenuNode) -> MenuNode:
        """Append any node.

        Raises:
            MenuStructureError: If the node cannot join this tree

        Returns:
            The added node
        """
        self._check_can_adopt(item)
        item._parent = self
        self._children.append(item)
        debug_tree(
            "Added item",
            menu=self._title,
            item=item.get_title(),
            index=len(self._children),
        )
        return item

    def add_action(
        self, title: str, func: Optional[Callable[..., Any]], *args: Any, **kwargs: Any
    ) -> ActionLeaf:
        """Append an action that calls ``func(*args, **kwargs)``.

        Arguments are bound now, so the action itself takes none. The
        leaf shares this menu's terminal and settings.

        Returns:
            The new leaf
        """
        if func is not None and (args or kwargs):
            action = partial(func, *args, **kwargs)
        else:
            action = func
        leaf = ActionLeaf(
            title, action, terminal=self._terminal, settings=self.settings
        )
        self.add_item(leaf)
        return leaf

    def add_sub_menu(self, sub_menu: "Menu") -> "Menu":
        """Append a nested menu.

        Raises:
            MenuStructureError: If ``sub_menu`` is not a Menu or would
                create a cycle
        """
        if not isinstance(sub_menu, Menu):
            raise MenuStructureError(
                f"add_sub_menu expects a Menu, got {type(sub_menu).__name__}"
            )
        self.add_item(sub_menu)
        return sub_menu

    def sub_menu(self, title: str) -> "Menu":
        """Create, append and return a nested menu sharing this menu's
        terminal and settings."""
        child = Menu(title, terminal=self._terminal, settings=self.settings)
        return self.add_sub_menu(child)

    def walk(self, depth: int = 0) -> Iterator[tuple[int, MenuNode]]:
        """Yield ``(depth, node)`` for this menu and every descendant,
        depth-first in display order."""
        yield depth, self
        for child in self._children:
            if isinstance(child, Menu):
                yield from child.walk(depth + 1)
            else:
                yield depth + 1, child

    def _check_can_adopt(self, item: MenuNode) -> None:
        if not isinstance(item, MenuNode):
            raise MenuStructureError(
                f"menu items must be MenuNode instances, got {type(item).__name__}"
            )
        title = item.get_title()
        if item.parent is not None:
            raise MenuStructureError(
                f"{title!r} already belongs to menu {item.parent.get_title()!r}",
                title=title,
            )
        ancestor: Optional[MenuNode] = self
        while ancestor is not None:
            if ancestor is item:
                raise MenuStructureError(
                    f"adding {title!r} to {self._title!r} would create a cycle",
                    title=title,
                )
            ancestor = ancestor.parent

    def render(self) -> None:
        """Clear the screen and list the children plus the 0 line."""
        terminal = self.terminal
        terminal.clear_screen()
        for index, child in enumerate(self._children, start=1):
            terminal.write_line(f"{index}. {child.get_title()}")
        label = self.settings.exit_label if self._is_root else self.settings.back_label
        terminal.write_line(f"{BACK_CHOICE}. {label}")

    def _read_choice(self) -> Optional[int]:
        """Read one choice.

        Returns:
            The choice, or None if the input was malformed and the menu
            should be drawn again
        """
        from numenu.cli.ui.terminal import parse_choice

        terminal = self.terminal
        try:
            if not self.settings.rerender_on_invalid_input:
                return terminal.read_integer(
                    self.settings.prompt, self.settings.invalid_input_message
                )
            choice = parse_choice(terminal.read_line(self.settings.prompt))
        except EOFError:
            debug_menu("End of input, leaving menu", menu=self._title)
            return BACK_CHOICE

        if choice is None:
            terminal.write_line(self.settings.invalid_input_message)
        return choice

    def _dispatch(self, child: MenuNode) -> None:
        self.state = MenuState.DISPATCHING
        debug_dispatch("Executing child", menu=self._title, child=child.get_title())
        try:
            child.execute()
        except Exception as e:
            # Leaves report their own errors; this covers other node types
            debug_dispatch(
                "Child raised", menu=self._title, child=child.get_title(), error=e
            )
            self.terminal.write_error(str(e) or type(e).__name__)
            if self.settings.pause_after_error:
                self.terminal.pause(self.settings.error_pause_message)
        finally:
            self.state = MenuState.RUNNING

    def execute(self) -> bool:
        """Run the menu loop until the user picks 0.

        Returns:
            Always False: the loop only ends on a "back"/"exit" choice
        """
        self.state = MenuState.RUNNING
        while True:
            self.render()
            choice = self._read_choice()
            if choice is None:
                continue

            if choice == BACK_CHOICE:
                self.state = MenuState.EXITING
                debug_menu("Leaving menu", menu=self._title, root=self._is_root)
                return False

            if not 0 < choice <= len(self._children):
                debug_menu("Invalid choice", menu=self._title, choice=choice)
                self.terminal.write_line(self.settings.invalid_choice_message)
                if self.settings.pause_on_invalid_choice:
                    self.terminal.pause(self.settings.pause_message)
                continue

            self._dispatch(self._children[choice - 1])
