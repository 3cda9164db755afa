"""
Unit tests for breakpoint specs and effective-map resolution.
"""

import logging

import pytest
from pydantic import ValidationError

from styled_breakpoints import (
    DEFAULT_BREAKPOINT_MAP,
    DEFAULT_BREAKPOINT_NAMES,
    DEFAULT_BREAKPOINTS,
    BreakpointConfigError,
    BreakpointMap,
    InvalidBreakpointWidth,
    ThemeSpec,
    get_breakpoints,
    up,
)


class TestDefaults:
    def test_default_breakpoints(self):
        assert dict(DEFAULT_BREAKPOINTS) == {
            "tablet": "768px",
            "desktop": "992px",
            "lgDesktop": "1200px",
        }

    def test_default_names_are_ordered(self):
        assert DEFAULT_BREAKPOINT_NAMES == ("tablet", "desktop", "lgDesktop")

    def test_default_map(self):
        assert DEFAULT_BREAKPOINT_MAP.names == DEFAULT_BREAKPOINT_NAMES
        assert DEFAULT_BREAKPOINT_MAP["desktop"] == "992px"


class TestBreakpointMap:
    def test_keeps_insertion_order(self):
        bp_map = BreakpointMap(breakpoints={"b": "20px", "a": "10px"})
        assert bp_map.names == ("b", "a")
        assert bp_map.items() == [("b", "20px"), ("a", "10px")]

    def test_container_protocol(self):
        assert "tablet" in DEFAULT_BREAKPOINT_MAP
        assert "phone" not in DEFAULT_BREAKPOINT_MAP
        assert len(DEFAULT_BREAKPOINT_MAP) == 3

    def test_successor(self):
        assert DEFAULT_BREAKPOINT_MAP.successor("tablet") == "desktop"
        assert DEFAULT_BREAKPOINT_MAP.successor("lgDesktop") is None

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_BREAKPOINT_MAP.breakpoints = {}  # type: ignore[misc]

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            BreakpointMap(breakpoints={})

    def test_rejects_bad_width(self):
        with pytest.raises(ValidationError):
            BreakpointMap(breakpoints={"tablet": "768"})

    def test_from_mapping_raises_width_error(self):
        with pytest.raises(InvalidBreakpointWidth) as exc_info:
            BreakpointMap.from_mapping({"tablet": "768"})
        assert exc_info.value.width == "768"

    def test_from_mapping_returns_map_unchanged(self):
        assert BreakpointMap.from_mapping(DEFAULT_BREAKPOINT_MAP) is DEFAULT_BREAKPOINT_MAP


class TestGetBreakpoints:
    def test_none_uses_defaults(self):
        assert get_breakpoints(None) is DEFAULT_BREAKPOINT_MAP

    def test_empty_mapping_uses_defaults(self):
        assert get_breakpoints({}) is DEFAULT_BREAKPOINT_MAP

    def test_empty_breakpoints_use_defaults(self):
        assert get_breakpoints({"breakpoints": {}}) is DEFAULT_BREAKPOINT_MAP
        assert get_breakpoints(ThemeSpec(breakpoints={})) is DEFAULT_BREAKPOINT_MAP

    def test_theme_breakpoints_win(self):
        bp_map = get_breakpoints({"breakpoints": {"md": "768px", "sm": "576px"}})
        assert bp_map.names == ("md", "sm")

    def test_other_theme_keys_ignored(self):
        theme = {"colors": {"primary": "#0066cc"}, "breakpoints": {"sm": "576px"}}
        assert get_breakpoints(theme).names == ("sm",)

    def test_default_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="styled_breakpoints.theme"):
            get_breakpoints(None)
        assert "using defaults" in caplog.text

    def test_invalid_theme_width(self):
        with pytest.raises(InvalidBreakpointWidth):
            get_breakpoints({"breakpoints": {"sm": "small"}})

    def test_non_string_width_is_width_error(self):
        with pytest.raises(InvalidBreakpointWidth) as exc_info:
            get_breakpoints({"breakpoints": {"tablet": 768}})
        assert exc_info.value.width == 768

    def test_breakpoints_list_is_config_error(self):
        with pytest.raises(BreakpointConfigError) as exc_info:
            get_breakpoints({"breakpoints": ["768px"]})
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestImmutability:
    """The default map is shared, so nothing reachable from it may change."""

    def test_returned_map_cannot_be_modified(self):
        bp_map = get_breakpoints(None)
        with pytest.raises(TypeError):
            bp_map.breakpoints["tablet"] = "1px"  # type: ignore[index]
        assert up("tablet")(None) == "@media (min-width: 768px)"

    def test_default_breakpoints_cannot_be_modified(self):
        with pytest.raises(TypeError):
            DEFAULT_BREAKPOINTS["tablet"] = "1px"  # type: ignore[index]
        assert up("tablet")(None) == "@media (min-width: 768px)"

    def test_map_detached_from_source_dict(self):
        source = {"sm": "576px", "md": "768px"}
        bp_map = BreakpointMap.from_mapping(source)
        source["sm"] = "1px"
        assert bp_map["sm"] == "576px"

    def test_model_dump_is_plain_dict(self):
        assert DEFAULT_BREAKPOINT_MAP.model_dump() == {"breakpoints": dict(DEFAULT_BREAKPOINTS)}
