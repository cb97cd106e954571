"""Tests for custom exceptions."""

import pytest

from numenu.utils.exceptions import (
    ConfigurationError,
    MenuStructureError,
    NumenuError,
)


def test_numenu_error_is_base():
    """Test NumenuError is base exception for all numenu errors."""
    assert issubclass(MenuStructureError, NumenuError)
    assert issubclass(ConfigurationError, NumenuError)


def test_structure_error_has_title():
    err = MenuStructureError("cycle", title="Settings")

    assert err.title == "Settings"
    assert str(err) == "cycle"


def test_structure_error_without_title():
    assert MenuStructureError("bad item").title is None


def test_catch_specific_exception():
    with pytest.raises(MenuStructureError):
        raise MenuStructureError("test")

    with pytest.raises(NumenuError):
        raise ConfigurationError("also caught by base")
