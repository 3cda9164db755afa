"""
Effective breakpoint map for a theme.

Precedence:
1. Non-empty ``breakpoints`` carried by the theme (its own key order kept)
2. Built-in default breakpoints
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .errors import BreakpointConfigError, InvalidBreakpointWidth
from .specs import DEFAULT_BREAKPOINT_MAP, BreakpointMap, ThemeSpec

logger = logging.getLogger(__name__)

ThemeLike = ThemeSpec | Mapping[str, Any] | None


def to_theme_spec(theme: ThemeLike) -> ThemeSpec:
    """
    Coerce a theme-like value (None, mapping or ThemeSpec) into a ThemeSpec.

    Raises:
        InvalidBreakpointWidth: If a breakpoint width is not <number><unit>
        BreakpointConfigError: If the theme or its breakpoints have the wrong shape
    """
    if theme is None:
        return ThemeSpec()
    if isinstance(theme, ThemeSpec):
        return theme

    breakpoints = theme.get("breakpoints")
    if isinstance(breakpoints, Mapping):
        for width in breakpoints.values():
            if not isinstance(width, str):
                raise InvalidBreakpointWidth(width)

    try:
        return ThemeSpec.model_validate(dict(theme))
    except ValidationError as e:
        raise BreakpointConfigError(f"Invalid theme: {e}") from e


def get_breakpoints(theme: ThemeLike = None) -> BreakpointMap:
    """
    Get the breakpoint map a theme resolves to.

    Args:
        theme: ThemeSpec, mapping with an optional "breakpoints" key, or None

    Returns:
        The theme's breakpoints, or the default map when it has none
    """
    spec = to_theme_spec(theme)
    if not spec.breakpoints:
        logger.debug("Theme has no breakpoints, using defaults")
        return DEFAULT_BREAKPOINT_MAP
    return BreakpointMap.from_mapping(spec.breakpoints)
