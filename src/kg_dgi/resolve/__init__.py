"""
Entity resolution modules.

Resolves free-text drug and gene names to DGIdb canonical names:
- Normalization: diacritic and case folding, punctuation stripping
- Alias index: normalized alias → canonical name, built once per domain
- Fuzzy matching: bigram Dice similarity with an acceptance threshold

Unresolved names fall back to the raw input.
"""

from kg_dgi.resolve.fuzzy import DEFAULT_THRESHOLD, resolve_name, resolve_names
from kg_dgi.resolve.index import (
    AliasIndex,
    AliasIndexRegistry,
    AliasTable,
    Domain,
    alias_collisions,
    build_index,
    get_registry,
)
from kg_dgi.resolve.normalize import normalize_text
from kg_dgi.resolve.similarity import BestMatch, dice_coefficient, find_best_match
from kg_dgi.resolve.tables import load_alias_table, read_alias_table

__all__ = [
    "normalize_text",
    "dice_coefficient",
    "find_best_match",
    "BestMatch",
    "AliasIndex",
    "AliasIndexRegistry",
    "AliasTable",
    "Domain",
    "build_index",
    "alias_collisions",
    "get_registry",
    "load_alias_table",
    "read_alias_table",
    "resolve_name",
    "resolve_names",
    "DEFAULT_THRESHOLD",
]
