"""Presentation settings for menu loops."""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from numenu.utils.constants import (
    BACK_LABEL,
    DEFAULT_PROMPT,
    ERROR_PAUSE_MESSAGE,
    EXIT_LABEL,
    INVALID_CHOICE_MESSAGE,
    INVALID_INPUT_MESSAGE,
    PAUSE_MESSAGE,
)
from numenu.utils.exceptions import ConfigurationError

ENV_PREFIX = "NUMENU_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse a boolean override like ``yes`` or ``0``.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name}: expected a boolean, got {value!r}")


@dataclass(frozen=True)
class MenuSettings:
    """How a menu loop presents itself.

    None of these change navigation: choice 0 always unwinds one level
    and a valid choice always runs exactly one child.
    """

    # Toggleable settings with descriptions (attr_name -> description)
    # These can be overridden with NUMENU_<ATTR_NAME> environment variables
    TOGGLES = {
        "pause_after_action": "Wait for Enter after an action completes",
        "pause_after_error": "Wait for Enter after an action fails",
        "pause_on_invalid_choice": "Wait for Enter after an out-of-range choice",
        "rerender_on_invalid_input": "Redraw the menu after non-numeric input",
    }

    pause_after_action: bool = True
    pause_after_error: bool = True
    pause_on_invalid_choice: bool = True
    rerender_on_invalid_input: bool = True

    prompt: str = DEFAULT_PROMPT
    exit_label: str = EXIT_LABEL
    back_label: str = BACK_LABEL
    invalid_choice_message: str = INVALID_CHOICE_MESSAGE
    invalid_input_message: str = INVALID_INPUT_MESSAGE
    pause_message: str = PAUSE_MESSAGE
    error_pause_message: str = ERROR_PAUSE_MESSAGE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MenuSettings":
        """Build settings from defaults plus NUMENU_* toggle overrides.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Settings with every recognised override applied
        """
        return cls().with_env_overrides(environ)

    def with_env_overrides(
        self, environ: Optional[Mapping[str, str]] = None
    ) -> "MenuSettings":
        """Return a copy with NUMENU_* toggle overrides applied."""
        env = os.environ if environ is None else environ
        overrides = {}
        for key, value in env.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if attr_name not in self.TOGGLES:
                continue
            overrides[attr_name] = parse_bool(value, key)
        return replace(self, **overrides)

    def without_pauses(self) -> "MenuSettings":
        """Return a copy that never waits for Enter."""
        return replace(
            self,
            pause_after_action=False,
            pause_after_error=False,
            pause_on_invalid_choice=False,
        )

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        return [(attr, desc, bool(getattr(self, attr))) for attr, desc in self.TOGGLES.items()]
