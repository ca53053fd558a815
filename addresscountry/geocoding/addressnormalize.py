"""
Address Query Construction and Normalization
--------------------------------------------

Two steps run before any geocoding call:
  1. build_address_query: join the raw address-line fields of one record
  2. normalize_address_query: lossy cleanup to improve provider match rate

Examples:
  >>> build_address_query(["18N CanalRd", None, " Singapore 48830 "])
  '18N CanalRd Singapore 48830'

  >>> normalize_address_query("Cra. 13 #8525 BogotáColombia")
  'Cra. 13 8525 BogotaColombia'
"""

from typing import Iterable, Optional

import pandas as pd

from addresscountry.utils.normalize import (
    transliterate_ascii,
    collapse_whitespace,
)


# Symbols the provider mis-parses (e.g. "#" before a unit number)
BREAKING_SYMBOLS = frozenset("#")


def _field_text(value) -> Optional[str]:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    text = str(value).strip()
    return text or None


def build_address_query(fields: Iterable, sep: str = " ") -> str:
    """Concatenate the address-line fields of one record into a query.

    Each field is stripped; None, NaN and blank fields are skipped.

    Args:
        fields: Raw address-line values for one record (any type; str() applied)
        sep: Separator placed between non-empty fields

    Returns:
        Trimmed query string (empty if every field was blank)

    Examples:
        >>> build_address_query(["Cra. 13 #8525", "Bogotá", "Colombia"])
        'Cra. 13 #8525 Bogotá Colombia'

        >>> build_address_query([float("nan"), "  "])
        ''
    """
    parts = [t for t in (_field_text(v) for v in fields) if t]
    return sep.join(parts).strip()


def normalize_address_query(s: str) -> str:
    """
    Lossy cleanup applied to a query before the geocoding call.

    Transformations:
      - Accented/compatibility characters -> closest single ASCII character
        ("á" -> "a", full-width "１" -> "1", no-break space -> space)
      - Control/format characters and stray combining marks removed
      - Breaking symbols removed ("#")
      - Characters with no ASCII equivalent (CJK, Cyrillic, ...) kept
      - Whitespace collapsed and trimmed

    Every character maps to at most one character, so the result is never
    longer than the input, and applying the function twice gives the same
    result as applying it once.

    Args:
        s: Address query

    Returns:
        Normalized query ("" for empty input)

    Examples:
        >>> normalize_address_query("Cra. 13 #8525 BogotáColombia")
        'Cra. 13 8525 BogotaColombia'

        >>> normalize_address_query("Unit # 5,  Zürich")
        'Unit 5, Zurich'
    """
    if not s:
        return ""

    s = transliterate_ascii(s)
    s = "".join(ch for ch in s if ch not in BREAKING_SYMBOLS)
    return collapse_whitespace(s)


__all__ = [
    "BREAKING_SYMBOLS",
    "build_address_query",
    "normalize_address_query",
]
