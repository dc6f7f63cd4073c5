"""A single-slot callback holder."""

from __future__ import annotations

from typing import Any, Callable, Optional


class Callback:
    """Holds at most one callable and invokes it with one argument."""

    def __init__(self) -> None:
        self._function: Optional[Callable[[Any], Any]] = None

    def attach(self, function: Callable[[Any], Any]) -> None:
        """Hook a function or bound method, replacing any earlier one."""
        if not callable(function):
            raise TypeError("callback must be callable")
        self._function = function

    def detach(self) -> None:
        """Release the hooked callable."""
        self._function = None

    def attached(self) -> bool:
        """Return True if a callable is hooked."""
        return self._function is not None

    def __call__(self, arg: Any) -> Any:
        """Invoke the hooked callable; returns None when nothing is hooked."""
        if self._function is None:
            return None
        return self._function(arg)