"""
Select, allocate and rank across several requested names.
"""

import logging
from collections.abc import Sequence

from kg_dgi.tools.allocate import allocate_budget
from kg_dgi.tools.models import DomainRecord, Interaction
from kg_dgi.tools.nodes import select_best_node
from kg_dgi.tools.rank import rank_and_truncate

logger = logging.getLogger(__name__)


def select_and_rank(
    records: Sequence[DomainRecord],
    resolved_names: Sequence[str],
    total_budget: int,
) -> dict[str, list[Interaction]]:
    """
    Build the ranked, budgeted interaction lists for each requested name.

    For each name:
    1. Choose the best node (exact > largest substring match)
    2. Split `total_budget` across matched names by interaction count
    3. Rank that node's interactions and keep its quota

    Names that match no node are left out of the result.

    Args:
        records: Nodes returned by DGIdb
        resolved_names: Requested names after resolution (duplicates allowed)
        total_budget: Maximum interactions across all names

    Returns:
        Dict mapping each matched name to its ranked interactions, in
        order of first match
    """
    chosen: dict[str, DomainRecord] = {}
    for name in resolved_names:
        node = select_best_node(records, name)
        if node is None:
            logger.debug("No node matches %r", name)
            continue
        chosen[name] = node

    counts = {name: len(node.interactions) for name, node in chosen.items()}
    quotas = allocate_budget(counts, total_budget)

    return {
        name: rank_and_truncate(node.interactions, quotas[name])
        for name, node in chosen.items()
    }
