"""
Text normalization for alias comparison.

Folds diacritics and case, replaces punctuation with spaces and collapses
whitespace so that "Café-Au Lait" and "cafe au  lait" compare equal.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """
    Canonicalize text for comparison.

    Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).

    Args:
        text: Arbitrary input (None is treated as empty)

    Returns:
        Lower-case ASCII letters, digits and single spaces
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _NON_ALNUM.sub(" ", folded.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()
