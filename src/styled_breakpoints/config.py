"""
Breakpoint configuration loading.

Reads a breakpoint map from a TOML or YAML file, keeping the file's key
order. Supported layouts:

TOML (breakpoints.toml):
    [breakpoints]
    tablet = "768px"
    desktop = "992px"

TOML (pyproject.toml):
    [tool.styled-breakpoints.breakpoints]
    tablet = "768px"

YAML (breakpoints.yaml):
    breakpoints:
      tablet: 768px
      desktop: 992px
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import BreakpointConfigError, BreakpointError
from .specs import BreakpointMap, ThemeSpec

logger = logging.getLogger(__name__)

TOML_SUFFIXES = (".toml",)
YAML_SUFFIXES = (".yaml", ".yml")
PYPROJECT_TOOL_KEY = "styled-breakpoints"


# =============================================================================
# Parsing
# =============================================================================


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise BreakpointConfigError(f"Invalid TOML in {path}: {e}") from e

    tool = data.get("tool")
    if tool is None:
        return data
    if not isinstance(tool, dict):
        raise BreakpointConfigError(f"'tool' in {path} must be a table")

    tool_section = tool.get(PYPROJECT_TOOL_KEY)
    if tool_section is None:
        return data
    if not isinstance(tool_section, dict):
        raise BreakpointConfigError(f"'tool.{PYPROJECT_TOOL_KEY}' in {path} must be a table")
    return tool_section


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise BreakpointConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BreakpointConfigError(f"Expected a mapping at the top of {path}")
    return data


def _read_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise BreakpointConfigError(f"Breakpoint config not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TOML_SUFFIXES:
        return _read_toml(path)
    if suffix in YAML_SUFFIXES:
        return _read_yaml(path)
    raise BreakpointConfigError(
        f"Unsupported config format '{suffix}' for {path}. Use .toml, .yaml or .yml"
    )


# =============================================================================
# Loading
# =============================================================================


def load_theme(path: Path) -> ThemeSpec:
    """
    Load a theme from a config file.

    Args:
        path: Path to a .toml, .yaml or .yml file

    Returns:
        ThemeSpec carrying the file's breakpoints (None when the file has none)

    Raises:
        BreakpointConfigError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    logger.debug("Loading breakpoint config from %s", path)
    data = _read_config(path)

    breakpoints = data.get("breakpoints")
    if breakpoints is not None and not isinstance(breakpoints, dict):
        raise BreakpointConfigError(f"'breakpoints' in {path} must be a table of name = width")

    try:
        return ThemeSpec(breakpoints=breakpoints)
    except ValidationError as e:
        raise BreakpointConfigError(f"Invalid breakpoints in {path}: {e}") from e


def load_breakpoints(path: Path) -> BreakpointMap:
    """
    Load a breakpoint map from a config file.

    Raises:
        BreakpointConfigError: If the file has no usable breakpoints
    """
    path = Path(path)
    theme = load_theme(path)
    if not theme.breakpoints:
        raise BreakpointConfigError(f"No breakpoints defined in {path}")

    try:
        return BreakpointMap.from_mapping(theme.breakpoints)
    except BreakpointError as e:
        raise BreakpointConfigError(f"Invalid breakpoints in {path}: {e.message}") from e
