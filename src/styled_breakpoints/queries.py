"""
Media query builders: ``up``, ``down``, ``between`` and ``only``.

Each builder is a two-stage call. ``up("tablet")`` captures the names and
returns an immutable query; calling that query with a theme resolves it:

    from styled_breakpoints import up, only

    up("tablet")(theme)    # "@media (min-width: 768px)"
    only("tablet")(None)   # "@media (min-width: 768px) and (max-width: 991.98px)"

Query objects are plain values, so they can be stored, compared and reused
across themes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .media import with_max_media, with_min_and_max_media, with_min_media
from .resolver import BreakpointsLike, calc_max_width, calc_min_width, get_breakpoint_value
from .specs import BreakpointMap
from .theme import ThemeLike, get_breakpoints
from .units import to_exclusive_upper_bound


@dataclass(frozen=True)
class BreakpointQuery(ABC):
    """Deferred media query over one or two breakpoint names."""

    def __call__(self, theme: ThemeLike = None) -> str:
        return self.resolve(get_breakpoints(theme))

    @property
    @abstractmethod
    def names(self) -> tuple[str, ...]:
        """Breakpoint names the query refers to."""

    @abstractmethod
    def resolve(self, breakpoints: BreakpointsLike) -> str:
        """Build the media query against an explicit breakpoint map."""


@dataclass(frozen=True)
class Up(BreakpointQuery):
    """Viewports at least as wide as the breakpoint."""

    name: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    def resolve(self, breakpoints: BreakpointsLike) -> str:
        return with_min_media(calc_min_width(self.name, breakpoints))


@dataclass(frozen=True)
class Down(BreakpointQuery):
    """Viewports narrower than the breakpoint's own width."""

    name: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    def resolve(self, breakpoints: BreakpointsLike) -> str:
        value = get_breakpoint_value(self.name, breakpoints)
        return with_max_media(to_exclusive_upper_bound(value))


@dataclass(frozen=True)
class Between(BreakpointQuery):
    """From the start breakpoint up to the end of the end breakpoint's range."""

    start: str
    end: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.start, self.end)

    def resolve(self, breakpoints: BreakpointsLike) -> str:
        bp_map = BreakpointMap.from_mapping(breakpoints)
        return with_min_and_max_media(
            calc_min_width(self.start, bp_map),
            calc_max_width(self.end, bp_map),
        )


@dataclass(frozen=True)
class Only(BreakpointQuery):
    """Exactly the breakpoint's own range, up to its successor."""

    name: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    def resolve(self, breakpoints: BreakpointsLike) -> str:
        bp_map = BreakpointMap.from_mapping(breakpoints)
        return with_min_and_max_media(
            calc_min_width(self.name, bp_map),
            calc_max_width(self.name, bp_map),
        )


def up(name: str) -> Up:
    return Up(name)


def down(name: str) -> Down:
    return Down(name)


def between(start: str, end: str) -> Between:
    return Between(start, end)


def only(name: str) -> Only:
    return Only(name)
