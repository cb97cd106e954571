"""numenu - numbered console menus."""

from importlib.metadata import version

from numenu.core import ActionLeaf, Menu, MenuNode
from numenu.utils.config import MenuSettings

__version__ = version("numenu")

__all__ = ["ActionLeaf", "Menu", "MenuNode", "MenuSettings", "__version__"]
