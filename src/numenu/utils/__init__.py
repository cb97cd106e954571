"""Utilities for numenu."""

from numenu.utils.config import MenuSettings
from numenu.utils.exceptions import ConfigurationError, MenuStructureError, NumenuError

__all__ = ["ConfigurationError", "MenuSettings", "MenuStructureError", "NumenuError"]
