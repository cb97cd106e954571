"""Explicit outcomes of running an action."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ok:
    """The action returned normally."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """The action raised; ``message`` is what gets shown to the user."""

    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Err":
        """Describe an exception, falling back to its class name."""
        return cls(str(exc) or type(exc).__name__)


ActionResult = Union[Ok, Err]
