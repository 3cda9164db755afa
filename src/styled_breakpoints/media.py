"""Media query templates. Values are inserted as given, without validation."""

from __future__ import annotations


def with_min_media(value: str) -> str:
    return f"@media (min-width: {value})"


def with_max_media(value: str) -> str:
    return f"@media (max-width: {value})"


def with_min_and_max_media(min_value: str, max_value: str) -> str:
    return f"@media (min-width: {min_value}) and (max-width: {max_value})"
