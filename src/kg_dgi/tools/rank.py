"""
Interaction ranking.

Approved drugs first, then highest interaction score. Missing approval
counts as not approved and a missing score as 0. Python's sort is stable,
so equal interactions keep their upstream order.
"""

from collections.abc import Sequence

from kg_dgi.errors import AllocationError
from kg_dgi.tools.models import Interaction


def rank_key(interaction: Interaction) -> tuple[bool, float]:
    """Sort key: approved first, then score descending."""
    return (not interaction.approved, -interaction.score)


def rank_and_truncate(interactions: Sequence[Interaction], quota: int) -> list[Interaction]:
    """
    Sort interactions and keep the top `quota`.

    Args:
        interactions: Interactions in upstream order (not modified)
        quota: Maximum number to return

    Returns:
        New list of at most `quota` interactions
    """
    if quota < 0:
        raise AllocationError(f"quota must be non-negative, got {quota}")
    if quota == 0:
        return []
    return sorted(interactions, key=rank_key)[:quota]
