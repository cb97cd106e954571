"""Shared consoles and tree rendering."""

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

if TYPE_CHECKING:
    from numenu.core.menu import Menu

console = Console()
err_console = Console(stderr=True)


def render_tree(menu: "Menu") -> Tree:
    """Build a Rich tree of menu titles.

    Submenus are shown in bold with their children nested below them;
    actions are listed with their choice number.

    Args:
        menu: Menu to render (usually the root)

    Returns:
        Tree ready for ``console.print``
    """
    from numenu.core.menu import Menu

    tree = Tree(f"[bold cyan]{escape(menu.get_title())}[/bold cyan]")

    def add_children(branch: Tree, parent: "Menu") -> None:
        for index, child in enumerate(parent.children, start=1):
            label = f"[dim]{index}.[/dim] {escape(child.get_title())}"
            if isinstance(child, Menu):
                sub_branch = branch.add(f"[bold]{label}[/bold]")
                add_children(sub_branch, child)
            else:
                branch.add(label)

    add_children(tree, menu)
    return tree
