"""
Node selection.

DGIdb answers a name query with every node whose name resembles the query.
Pick the one node that best represents the requested name.
"""

from collections.abc import Sequence
from typing import TypeVar

from kg_dgi.tools.models import DomainRecord

R = TypeVar("R", bound=DomainRecord)


def select_best_node(records: Sequence[R], term: str) -> R | None:
    """
    Pick the record that best matches `term`.

    Exact (case-insensitive) name match wins immediately. Otherwise the
    record whose name contains `term` with the most interactions; the
    first such record wins ties.

    Args:
        records: Candidate nodes in upstream order
        term: Resolved (or raw fallback) name

    Returns:
        Best record or None if nothing matches
    """
    t = term.lower()

    for record in records:
        if record.name.lower() == t:
            return record

    best: R | None = None
    best_len = -1
    for record in records:
        if t in record.name.lower():
            size = len(record.interactions or [])
            if size > best_len:
                best = record
                best_len = size
    return best
