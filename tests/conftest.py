"""Shared pytest fixtures."""

import os

import pytest

from numenu.utils.config import MenuSettings
from tests.helpers.fake_terminal import ScriptedTerminal


@pytest.fixture(autouse=True)
def clean_numenu_env(monkeypatch):
    """Drop NUMENU_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("NUMENU_"):
            monkeypatch.delenv(key)


@pytest.fixture
def terminal():
    """Scripted terminal with an empty script; use ``feed`` to add input."""
    return ScriptedTerminal()


@pytest.fixture
def quiet_settings():
    """Settings that never pause."""
    return MenuSettings().without_pauses()


@pytest.fixture
def calls():
    """List that recording actions append to."""
    return []
