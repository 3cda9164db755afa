"""
styled-breakpoints - CSS media queries from named, ordered breakpoints.

Usage:
    from styled_breakpoints import up, down, between, only

    theme = {"breakpoints": {"sm": "576px", "md": "768px", "lg": "992px"}}

    up("md")(theme)              # "@media (min-width: 768px)"
    down("md")(theme)            # "@media (max-width: 767.98px)"
    between("sm", "md")(theme)   # "@media (min-width: 576px) and (max-width: 991.98px)"
    only("sm")(theme)            # "@media (min-width: 576px) and (max-width: 767.98px)"

    # Themes without breakpoints fall back to the defaults
    up("tablet")(None)           # "@media (min-width: 768px)"
"""

from __future__ import annotations

from ._version import __version__
from .config import load_breakpoints, load_theme
from .errors import (
    LIBRARY_TAG,
    BreakpointConfigError,
    BreakpointError,
    InvalidBreakpointName,
    InvalidBreakpointWidth,
    NoSuccessor,
    invariant,
    make_error_message,
)
from .media import with_max_media, with_min_and_max_media, with_min_media
from .queries import Between, BreakpointQuery, Down, Only, Up, between, down, only, up
from .resolver import (
    calc_max_width,
    calc_min_width,
    get_breakpoint_value,
    get_next_breakpoint_name,
    get_next_breakpoint_value,
    next_breakpoint_name,
)
from .specs import (
    DEFAULT_BREAKPOINT_MAP,
    DEFAULT_BREAKPOINT_NAMES,
    DEFAULT_BREAKPOINTS,
    BreakpointMap,
    ThemeSpec,
)
from .theme import get_breakpoints
from .units import parse_width, to_exclusive_upper_bound

__all__ = [
    "__version__",
    # Queries
    "up",
    "down",
    "between",
    "only",
    "BreakpointQuery",
    "Up",
    "Down",
    "Between",
    "Only",
    # Resolution
    "get_breakpoint_value",
    "get_next_breakpoint_name",
    "get_next_breakpoint_value",
    "next_breakpoint_name",
    "calc_min_width",
    "calc_max_width",
    "get_breakpoints",
    # Width math and templates
    "parse_width",
    "to_exclusive_upper_bound",
    "with_min_media",
    "with_max_media",
    "with_min_and_max_media",
    # Specs and defaults
    "BreakpointMap",
    "ThemeSpec",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_BREAKPOINT_NAMES",
    "DEFAULT_BREAKPOINT_MAP",
    # Config
    "load_breakpoints",
    "load_theme",
    # Errors
    "LIBRARY_TAG",
    "BreakpointError",
    "InvalidBreakpointName",
    "NoSuccessor",
    "InvalidBreakpointWidth",
    "BreakpointConfigError",
    "invariant",
    "make_error_message",
]
