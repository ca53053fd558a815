"""Shared text normalization utilities.

This module provides the character-level transforms used by address
normalization. Every transform maps one character to at most one
character, so none of them can lengthen a string.
"""

import re
import unicodedata


# Latin letters with no Unicode decomposition to an ASCII base
_ASCII_FALLBACKS = {
    "ø": "o", "Ø": "O",
    "ł": "l", "Ł": "L",
    "đ": "d", "Đ": "D",
    "ð": "d", "Ð": "D",
    "ħ": "h", "Ħ": "H",
    "ı": "i",
    "ŧ": "t", "Ŧ": "T",
    "þ": "t", "Þ": "T",
}

_WHITESPACE_RE = re.compile(r"\s+")


def ascii_char(ch: str) -> str:
    """Best single-character ASCII equivalent of ``ch``.

    Returns:
        - ``ch`` itself if it is ASCII
        - the empty string for control/format characters and combining marks
        - the ASCII base letter for accented/compatibility characters
          (NFKD first character), or a fallback table entry
        - ``ch`` unchanged when there is no ASCII equivalent (CJK, Cyrillic, ...)

    Examples:
        >>> ascii_char("á")
        'a'

        >>> ascii_char("\\u0301")  # combining acute accent
        ''

        >>> ascii_char("北")
        '北'
    """
    if ch.isascii():
        if unicodedata.category(ch) == "Cc" and not ch.isspace():
            return ""
        return ch

    category = unicodedata.category(ch)
    if category in ("Cc", "Cf") or category.startswith("M"):
        return ""

    if ch in _ASCII_FALLBACKS:
        return _ASCII_FALLBACKS[ch]

    decomposed = unicodedata.normalize("NFKD", ch)
    if decomposed and decomposed[0].isascii() and decomposed[0].isprintable():
        return decomposed[0]

    return ch


def transliterate_ascii(s: str) -> str:
    """Replace accented and compatibility characters with ASCII, char by char.

    Unlike ``s.encode("ascii", "ignore")``, characters with no ASCII
    equivalent are kept rather than dropped.

    Examples:
        >>> transliterate_ascii("Bogotá")
        'Bogota'

        >>> transliterate_ascii("Øresund")
        'Oresund'
    """
    if not s:
        return ""
    return "".join(ascii_char(ch) for ch in s)


def collapse_whitespace(s: str) -> str:
    """Collapse runs of whitespace to a single space and trim.

    Examples:
        >>> collapse_whitespace("  18N   Canal Rd ")
        '18N Canal Rd'
    """
    if not s:
        return ""
    return _WHITESPACE_RE.sub(" ", s).strip()


__all__ = [
    "ascii_char",
    "transliterate_ascii",
    "collapse_whitespace",
]
