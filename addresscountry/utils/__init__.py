"""Shared utilities for addresscountry package."""

from addresscountry.utils.normalize import (
    ascii_char,
    transliterate_ascii,
    collapse_whitespace,
)

__all__ = [
    # Normalization
    "ascii_char",
    "transliterate_ascii",
    "collapse_whitespace",
]
