"""Core modules for numenu.

This package provides:
- MenuNode: Abstract titled, executable node
- ActionLeaf: Node that runs a callable
- Menu: Node with children and the interactive loop
- Ok / Err: Outcomes of running an action
"""

from numenu.core.menu import Menu, MenuState
from numenu.core.node import ActionLeaf, MenuNode
from numenu.core.results import ActionResult, Err, Ok

__all__ = [
    "ActionLeaf",
    "ActionResult",
    "Err",
    "Menu",
    "MenuNode",
    "MenuState",
    "Ok",
]
