"""
Width arithmetic for breakpoint boundaries.

A width is a non-negative number followed immediately by a unit suffix
("768px", "62.5em"). The unit is echoed back unchanged; only the magnitude
takes part in arithmetic, in ``Decimal`` so rendered values never pick up
binary floating-point noise.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .errors import InvalidBreakpointWidth

# Subtracted from a width to get the largest value strictly below it.
BREAKPOINT_EPSILON = Decimal("0.02")
_TWO_PLACES = Decimal("0.01")

_WIDTH_RE = re.compile(r"(?P<magnitude>\d+(?:\.\d+)?)(?P<unit>[a-zA-Z%]+)")


def parse_width(width: str) -> tuple[Decimal, str]:
    """
    Split a width into its magnitude and unit.

    Args:
        width: Width string such as "992px"

    Returns:
        (Decimal("992"), "px")

    Raises:
        InvalidBreakpointWidth: If the string is not <number><unit>
    """
    if not isinstance(width, str):
        raise InvalidBreakpointWidth(width)
    match = _WIDTH_RE.fullmatch(width)
    if match is None:
        raise InvalidBreakpointWidth(width)
    return Decimal(match.group("magnitude")), match.group("unit")


def is_valid_width(width: object) -> bool:
    return isinstance(width, str) and _WIDTH_RE.fullmatch(width) is not None


def to_exclusive_upper_bound(width: str) -> str:
    """
    Return the width just below ``width``, used as a max-width bound.

    Adjacent min-width / max-width ranges then never overlap:
    "992px" -> "991.98px".

    Trailing zeros beyond two decimal places are dropped ("1.000px" ->
    "0.98px"); significant extra places are kept ("10.125px" -> "10.105px").
    """
    magnitude, unit = parse_width(width)
    bound = magnitude - BREAKPOINT_EPSILON
    if bound.as_tuple().exponent < -2:
        two_places = bound.quantize(_TWO_PLACES)
        if two_places == bound:
            bound = two_places
    return f"{bound:f}{unit}"
