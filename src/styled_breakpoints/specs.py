"""
Breakpoint specification types.

Defines the ordered breakpoint map, the theme shape it is read from, and the
built-in default breakpoints.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .errors import InvalidBreakpointWidth
from .units import is_valid_width

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_BREAKPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "tablet": "768px",
        "desktop": "992px",
        "lgDesktop": "1200px",
    }
)

DEFAULT_BREAKPOINT_NAMES: tuple[str, ...] = tuple(DEFAULT_BREAKPOINTS)


# =============================================================================
# Breakpoint Map
# =============================================================================


class BreakpointMap(BaseModel):
    """
    Ordered breakpoint map (name -> width), ascending by size.

    Order matters: it defines each breakpoint's successor and therefore the
    upper bound of its range. The last breakpoint has no successor.

    Example:
        BreakpointMap(
            breakpoints={
                "tablet": "768px",
                "desktop": "992px",
                "lgDesktop": "1200px",
            }
        )
    """

    model_config = ConfigDict(frozen=True)

    breakpoints: Mapping[str, str] = Field(
        description="Breakpoint widths (name -> '<number><unit>'), read-only"
    )

    @field_validator("breakpoints")
    @classmethod
    def validate_breakpoints(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        if not value:
            raise ValueError("A breakpoint map needs at least one breakpoint")
        for name, width in value.items():
            if not is_valid_width(width):
                raise ValueError(f"Breakpoint '{name}' has invalid width '{width}'")
        return MappingProxyType(dict(value))

    @field_serializer("breakpoints")
    def serialize_breakpoints(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @classmethod
    def from_mapping(cls, breakpoints: Mapping[str, str]) -> BreakpointMap:
        """
        Build a map from any ordered mapping, keeping its key order.

        Raises:
            InvalidBreakpointWidth: If a width is not <number><unit>
        """
        if isinstance(breakpoints, BreakpointMap):
            return breakpoints
        for width in breakpoints.values():
            if not is_valid_width(width):
                raise InvalidBreakpointWidth(width)
        return cls(breakpoints=dict(breakpoints))

    @property
    def names(self) -> tuple[str, ...]:
        """Breakpoint names in ascending order."""
        return tuple(self.breakpoints)

    def items(self) -> list[tuple[str, str]]:
        return list(self.breakpoints.items())

    def successor(self, name: str) -> str | None:
        """Name of the breakpoint after ``name``, or None for the last one."""
        names = self.names
        index = names.index(name)
        if index + 1 < len(names):
            return names[index + 1]
        return None

    def __contains__(self, name: object) -> bool:
        return name in self.breakpoints

    def __getitem__(self, name: str) -> str:
        return self.breakpoints[name]

    def __len__(self) -> int:
        return len(self.breakpoints)


DEFAULT_BREAKPOINT_MAP = BreakpointMap(breakpoints=dict(DEFAULT_BREAKPOINTS))


# =============================================================================
# Theme
# =============================================================================


class ThemeSpec(BaseModel):
    """
    Theme-like configuration that may carry its own breakpoints.

    Only ``breakpoints`` is read; any other theme keys (colors, spacing, ...)
    are accepted and ignored.

    Example:
        ThemeSpec(breakpoints={"sm": "576px", "md": "768px", "lg": "992px"})
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    breakpoints: dict[str, str] | None = Field(
        default=None, description="Breakpoint widths; the defaults apply when absent or empty"
    )
