"""Debug logging utility."""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from numenu.utils.config import parse_bool
from numenu.utils.constants import ENV_DEBUG, ENV_DEBUG_LOG
from numenu.utils.exceptions import ConfigurationError


def is_debug_enabled() -> bool:
    """Whether NUMENU_DEBUG asks for debug output."""
    value = os.environ.get(ENV_DEBUG)
    if not value:
        return False
    try:
        return parse_bool(value, ENV_DEBUG)
    except ConfigurationError:
        return False


def _get_log_path() -> Optional[Path]:
    """Get the debug log file, if one is configured."""
    if log_path := os.environ.get(ENV_DEBUG_LOG):
        return Path(log_path)
    return None


def _log_to_file(line: str):
    """Append line to debug log file."""
    log_path = _get_log_path()
    if log_path is None:
        return
    try:
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except (OSError, UnicodeError):
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'dispatch', 'action', 'tree'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not is_debug_enabled():
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[numenu:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug_menu(message: str, **kwargs):
    """Log menu loop debug message."""
    debug("menu", message, **kwargs)


def debug_dispatch(message: str, **kwargs):
    """Log dispatch-related debug message."""
    debug("dispatch", message, **kwargs)


def debug_action(message: str, **kwargs):
    """Log action-related debug message."""
    debug("action", message, **kwargs)


def debug_tree(message: str, **kwargs):
    """Log tree construction debug message."""
    debug("tree", message, **kwargs)
