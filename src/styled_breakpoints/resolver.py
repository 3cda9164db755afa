"""
Breakpoint resolution.

Looks up breakpoint widths and successors in an ordered breakpoint map,
raising InvalidBreakpointName / NoSuccessor with their exact diagnostics.
Name matching is exact: no case folding, no trimming.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import partial

from .errors import InvalidBreakpointName, NoSuccessor
from .specs import BreakpointMap
from .units import to_exclusive_upper_bound

BreakpointsLike = BreakpointMap | Mapping[str, str]


def _as_map(breakpoints: BreakpointsLike) -> BreakpointMap:
    return BreakpointMap.from_mapping(breakpoints)


def _validate_name(name: str, breakpoints: BreakpointMap) -> None:
    if name not in breakpoints:
        raise InvalidBreakpointName(name, breakpoints.names)


def get_breakpoint_value(name: str, breakpoints: BreakpointsLike) -> str:
    """
    Get the width of a breakpoint.

    Args:
        name: Breakpoint name (e.g., "tablet")
        breakpoints: Ordered breakpoint map

    Returns:
        Width string (e.g., "768px")

    Raises:
        InvalidBreakpointName: If name is not in the map
    """
    bp_map = _as_map(breakpoints)
    _validate_name(name, bp_map)
    return bp_map[name]


def get_next_breakpoint_name(name: str, breakpoints: BreakpointsLike) -> str | None:
    """
    Get the name of the breakpoint after ``name``.

    Returns None when ``name`` is the last breakpoint.

    Raises:
        InvalidBreakpointName: If name is not in the map
    """
    bp_map = _as_map(breakpoints)
    _validate_name(name, bp_map)
    return bp_map.successor(name)


def next_breakpoint_name(name: str) -> Callable[[BreakpointsLike], str | None]:
    """
    Deferred form of get_next_breakpoint_name: bind the name now, pass the map later.

    Example:
        next_breakpoint_name("tablet")(DEFAULT_BREAKPOINT_MAP)  # "desktop"
    """
    return partial(get_next_breakpoint_name, name)


def get_next_breakpoint_value(name: str, breakpoints: BreakpointsLike) -> str:
    """
    Get the width of the breakpoint after ``name``.

    Raises:
        InvalidBreakpointName: If name is not in the map
        NoSuccessor: If name is the last breakpoint
    """
    bp_map = _as_map(breakpoints)
    next_name = get_next_breakpoint_name(name, bp_map)
    if next_name is None:
        names = bp_map.names
        fallback = names[-2] if len(names) > 1 else None
        raise NoSuccessor(name, fallback)
    return bp_map[next_name]


def calc_min_width(name: str, breakpoints: BreakpointsLike) -> str:
    """Lower bound of a breakpoint's range: its own width."""
    return get_breakpoint_value(name, breakpoints)


def calc_max_width(name: str, breakpoints: BreakpointsLike) -> str:
    """Upper bound of a breakpoint's range: just below its successor's width."""
    return to_exclusive_upper_bound(get_next_breakpoint_value(name, breakpoints))
