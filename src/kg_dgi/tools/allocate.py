"""
Fair-share budget allocation.

Divides a fixed number of output slots across requested entities. Entities
are served in ascending order of available supply; each gets at most the
average of what is left, capped by its own supply, so unused share from
small entities flows on to the larger ones later in the pass.
"""

import logging
import math
from collections.abc import Mapping

from kg_dgi.errors import AllocationError

logger = logging.getLogger(__name__)


def allocate_budget(available: Mapping[str, int], total_budget: int) -> dict[str, int]:
    """
    Allocate `total_budget` slots across names.

    Guarantees 0 <= quota[name] <= available[name] and
    sum(quota) <= total_budget. When the budget covers everything,
    every name gets its full count.

    Args:
        available: Name to number of interactions on offer
        total_budget: Slots to share out

    Returns:
        Name to quota, in the key order of `available`

    Raises:
        AllocationError: Negative budget or negative count
    """
    if total_budget < 0:
        raise AllocationError(f"total_budget must be non-negative, got {total_budget}")
    negative = {name: count for name, count in available.items() if count < 0}
    if negative:
        raise AllocationError(f"available counts must be non-negative, got {negative}")

    entries = sorted(available.items(), key=lambda item: item[1])
    remaining = total_budget
    quotas: dict[str, int] = {}

    for i, (name, count) in enumerate(entries):
        share = remaining / (len(entries) - i)
        fair_share = math.floor(share) if math.isfinite(share) and share > 0 else 0
        quota = min(count, max(fair_share, 0))
        quotas[name] = quota
        remaining -= quota

    logger.debug("Allocated %d of %d slots: %s", total_budget - remaining, total_budget, quotas)
    return {name: quotas[name] for name in available}
