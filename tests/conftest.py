"""Shared pytest fixtures for styled-breakpoints tests."""

from typing import Any

import pytest

from styled_breakpoints import BreakpointMap


@pytest.fixture
def custom_theme() -> dict[str, Any]:
    """Return a theme carrying its own breakpoints."""
    return {
        "breakpoints": {
            "tablet": "768px",
            "desktop": "992px",
            "lgDesktop": "1200px",
        },
    }


@pytest.fixture
def empty_theme() -> dict[str, Any]:
    """Return a theme without breakpoints."""
    return {}


@pytest.fixture
def bootstrap_breakpoints() -> BreakpointMap:
    """Return a five-step breakpoint map unrelated to the defaults."""
    return BreakpointMap(
        breakpoints={
            "sm": "576px",
            "md": "768px",
            "lg": "992px",
            "xl": "1200px",
            "xxl": "1400px",
        }
    )
