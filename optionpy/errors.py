from __future__ import annotations
from typing import Any, Optional


class OptionError(Exception):
    """Base class for errors raised by optionpy itself.

    Absence is never reported through this hierarchy; it is carried as data
    inside ``NONE`` / ``NoneE``. These errors signal misuse of the API.
    """


class ArgumentError(OptionError, ValueError):
    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"{argument} must be provided")
        self.argument = argument


def require_callable(argument: str, f: Any) -> None:
    if f is None:
        raise ArgumentError(argument)
    if not callable(f):
        raise ArgumentError(argument, f"{argument} must be callable, got {type(f).__name__}")


def require_exception_type(argument: str, t: Any) -> None:
    types = t if isinstance(t, tuple) else (t,)
    if not types:
        raise ArgumentError(argument, f"{argument} must name at least one exception type")
    for x in types:
        if not (isinstance(x, type) and issubclass(x, BaseException)):
            raise ArgumentError(argument, f"{argument} must be an exception type, got {x!r}")
