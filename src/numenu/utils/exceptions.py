"""Custom exceptions for numenu.

This module defines a hierarchy of exceptions for different error types:
- NumenuError: Base exception for all numenu errors
- MenuStructureError: Invalid menu tree construction (with offending title)
- ConfigurationError: Configuration related errors

Errors raised by user actions are never wrapped in these types; they are
caught at the action boundary and reported as result values instead.
"""

from typing import Optional


class NumenuError(Exception):
    """Base exception for all numenu errors.

    All numenu-specific exceptions inherit from this class, allowing
    callers to catch all numenu errors with a single except clause.
    """

    pass


class MenuStructureError(NumenuError):
    """Invalid menu tree construction.

    Raised while building a tree, before any menu loop runs, such as:
    - Adding a node that already has a parent
    - Adding a menu to itself or to one of its descendants
    - Adding something that is not a menu node

    Attributes:
        title: Title of the node that could not be added, if known
    """

    def __init__(self, message: str, title: Optional[str] = None):
        super().__init__(message)
        self.title = title


class ConfigurationError(NumenuError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unparseable boolean environment overrides
    """

    pass
