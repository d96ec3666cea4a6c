"""
Drug-gene interaction lookup tools.

- get_gene_interactions_for_drugs: genes interacting with 1+ drugs
- get_drug_interactions_for_genes: drugs interacting with 1+ genes

Both resolve the requested names, fetch matching DGIdb nodes, and return
at most one shared budget of interactions (40 for a single name, 100
across several), approved drugs first, then highest interaction score.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from kg_dgi.config import Settings, settings as default_settings
from kg_dgi.errors import DGIdbError
from kg_dgi.resolve import AliasIndexRegistry, Domain, get_registry, resolve_names
from kg_dgi.tools.citations import to_citations
from kg_dgi.tools.models import DomainRecord
from kg_dgi.tools.pipeline import select_and_rank

if TYPE_CHECKING:
    from kg_dgi.client import DGIdbClient

logger = logging.getLogger(__name__)


@dataclass
class InteractionResult:
    """Outcome of an interaction lookup."""
    requested: list[str]
    resolved: list[str]
    interactions: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"error": self.error, "requested": self.requested, "resolved": self.resolved}
        return self.interactions


def split_names(names: str | Sequence[str]) -> list[str]:
    """Split a comma-separated string (or list of them) into clean names."""
    parts = names.split(",") if isinstance(names, str) else [
        piece for name in names for piece in name.split(",")
    ]
    return [p.strip() for p in parts if p.strip()]


def _lookup(
    names: str | Sequence[str],
    domain: Domain,
    fetch: Callable[[DGIdbClient, list[str]], list[DomainRecord]],
    client: DGIdbClient | None,
    registry: AliasIndexRegistry | None,
    config: Settings | None,
) -> InteractionResult:
    config = config or default_settings
    registry = registry or get_registry()

    requested = split_names(names)
    if not requested:
        return InteractionResult(requested=[], resolved=[], error=f"No {domain.value} names given")

    index = registry.get(domain)
    resolved = resolve_names(requested, index, config.similarity_threshold)
    total_budget = config.budget_for(len(resolved))
    logger.debug("Resolved %s names %s -> %s (budget %d)", domain.value, requested, resolved, total_budget)

    own_client = client is None
    if own_client:
        from kg_dgi.client import DGIdbClient

        client = DGIdbClient(config=config)
    try:
        nodes = fetch(client, resolved)
    except DGIdbError as e:
        logger.warning("DGIdb lookup failed for %s: %s", resolved, e)
        return InteractionResult(requested=requested, resolved=resolved, error=str(e))
    finally:
        if own_client:
            client.close()

    if not nodes:
        return InteractionResult(
            requested=requested,
            resolved=resolved,
            error=f"No {domain.value} nodes found for: {', '.join(resolved)}",
        )

    ranked = select_and_rank(nodes, resolved, total_budget)
    return InteractionResult(
        requested=requested,
        resolved=resolved,
        interactions={
            name: to_citations(items, config.citation_base_url)
            for name, items in ranked.items()
        },
    )


def get_gene_interactions_for_drugs(
    drug_names: str | Sequence[str],
    *,
    client: DGIdbClient | None = None,
    registry: AliasIndexRegistry | None = None,
    config: Settings | None = None,
) -> InteractionResult:
    """
    Gene interactions for one or more drugs.

    Args:
        drug_names: Comma-separated string or list of drug names
        client: DGIdb client (a temporary one is opened if omitted)
        registry: Alias indexes (process-wide registry if omitted)
        config: Settings override

    Returns:
        InteractionResult keyed by resolved drug name
    """
    return _lookup(
        drug_names,
        Domain.DRUG,
        lambda c, names: c.fetch_drug_nodes(names),
        client,
        registry,
        config,
    )


def get_drug_interactions_for_genes(
    gene_names: str | Sequence[str],
    *,
    client: DGIdbClient | None = None,
    registry: AliasIndexRegistry | None = None,
    config: Settings | None = None,
) -> InteractionResult:
    """
    Drug interactions for one or more genes.

    Args:
        gene_names: Comma-separated string or list of gene symbols
        client: DGIdb client (a temporary one is opened if omitted)
        registry: Alias indexes (process-wide registry if omitted)
        config: Settings override

    Returns:
        InteractionResult keyed by resolved gene name
    """
    return _lookup(
        gene_names,
        Domain.GENE,
        lambda c, names: c.fetch_gene_nodes(names),
        client,
        registry,
        config,
    )
