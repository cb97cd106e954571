"""Tests for action results."""

from numenu.core.results import Err, Ok


def test_ok_is_ok():
    assert Ok().ok is True


def test_err_is_not_ok():
    assert Err("failed").ok is False


def test_err_from_exception_uses_message():
    assert Err.from_exception(ValueError("bad value")) == Err("bad value")


def test_err_from_exception_without_message():
    assert Err.from_exception(RuntimeError()).message == "RuntimeError"
