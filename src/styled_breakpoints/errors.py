"""
Error types for breakpoint resolution and configuration.

Every error carries the bare diagnostic in ``message``; ``str(error)`` adds
the library tag so the origin is obvious when the error reaches a top-level
caller.
"""

from __future__ import annotations

from collections.abc import Iterable

LIBRARY_TAG = "[styled-breakpoints]"


class BreakpointError(Exception):
    """Base exception for all styled-breakpoints errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"{LIBRARY_TAG}: {self.message}"


class InvalidBreakpointName(BreakpointError):
    """
    Raised when a name is not a key of the effective breakpoint map.

    Attributes:
        name: The rejected name
        valid_names: All names of the map, in map order
    """

    def __init__(self, name: str, valid_names: Iterable[str]):
        self.name = name
        self.valid_names = tuple(valid_names)
        super().__init__(make_error_message(name, self.valid_names))


class NoSuccessor(BreakpointError):
    """
    Raised when an operation needs the next breakpoint of the last one.

    Attributes:
        name: The highest breakpoint, which has no maximum width
        fallback: The highest breakpoint that does have a successor
    """

    def __init__(self, name: str, fallback: str | None):
        self.name = name
        self.fallback = fallback
        super().__init__(
            f"Don't use '{name}' because it doesn't have a maximum width. Use '{fallback}'."
        )


class InvalidBreakpointWidth(BreakpointError, ValueError):
    """Raised when a width is not a non-negative number followed by a unit."""

    def __init__(self, width: object):
        self.width = width
        super().__init__(
            f"'{width}' is invalid breakpoint width. "
            "Use a non-negative number followed by a unit, e.g. '768px'."
        )


class BreakpointConfigError(BreakpointError):
    """Raised when a breakpoint configuration file cannot be loaded."""

    pass


def make_error_message(name: str, breakpoints: Iterable[str]) -> str:
    """
    Build the diagnostic for an unknown breakpoint name.

    Args:
        name: The rejected name
        breakpoints: Breakpoint names, or a mapping keyed by them, in order

    Returns:
        Message such as "'xs' is invalid breakpoint name. Use 'tablet, desktop'."
    """
    valid = ", ".join(breakpoints)
    return f"'{name}' is invalid breakpoint name. Use '{valid}'."


def invariant(condition: object = False, message: str = "Invariant violation") -> None:
    """Raise a tagged BreakpointError unless ``condition`` holds."""
    if not condition:
        raise BreakpointError(message)
