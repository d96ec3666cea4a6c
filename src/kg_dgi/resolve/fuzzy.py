"""
Fuzzy name resolution.

Maps a free-form name to the canonical name of its closest alias. Names
that match nothing well enough fall back to the raw input; downstream
matching then works on the raw text, which can still miss.
"""

import logging
from collections.abc import Iterable

from kg_dgi.resolve.index import AliasIndex
from kg_dgi.resolve.normalize import normalize_text
from kg_dgi.resolve.similarity import find_best_match

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7


def resolve_name(
    raw_name: str | None,
    index: AliasIndex,
    threshold: float = DEFAULT_THRESHOLD,
) -> str | None:
    """
    Resolve a free-form name to a canonical name.

    Args:
        raw_name: User or LLM supplied name (may be None or empty)
        index: Alias index for the name's domain
        threshold: Minimum similarity (0-1) to accept the best alias

    Returns:
        Canonical name, or None if the name is missing or nothing clears
        the threshold
    """
    if not raw_name:
        return None

    query = normalize_text(raw_name)
    best = find_best_match(query, index.keys)
    if best is None or best.rating < threshold:
        logger.debug(
            "No alias for %r (best %r at %.3f)",
            raw_name,
            best.target if best else None,
            best.rating if best else 0.0,
        )
        return None

    canonical = index.aliases[best.target]
    logger.debug("Resolved %r -> %r via %r (%.3f)", raw_name, canonical, best.target, best.rating)
    return canonical


def resolve_names(
    raw_names: Iterable[str],
    index: AliasIndex,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[str]:
    """
    Resolve each name, keeping the raw name when it does not resolve.

    Order and duplicates of the input are preserved.
    """
    return [resolve_name(raw, index, threshold) or raw for raw in raw_names]
