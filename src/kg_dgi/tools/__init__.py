"""
Interaction tool functions.

Deterministic selection, budgeting and ranking of DGIdb interactions,
plus the two lookup tools built on them. All tools return structured
data (never prose).
"""

from kg_dgi.tools.allocate import allocate_budget
from kg_dgi.tools.citations import PUBMED_BASE_URL, citation_url, to_citations
from kg_dgi.tools.interactions import (
    InteractionResult,
    get_drug_interactions_for_genes,
    get_gene_interactions_for_drugs,
    split_names,
)
from kg_dgi.tools.models import (
    DomainRecord,
    DrugRef,
    GeneRef,
    Interaction,
    InteractionType,
    Publication,
    Source,
)
from kg_dgi.tools.nodes import select_best_node
from kg_dgi.tools.pipeline import select_and_rank
from kg_dgi.tools.rank import rank_and_truncate, rank_key

__all__ = [
    # Records
    "DomainRecord",
    "Interaction",
    "InteractionType",
    "GeneRef",
    "DrugRef",
    "Publication",
    "Source",
    # Selection and ranking
    "select_best_node",
    "allocate_budget",
    "rank_and_truncate",
    "rank_key",
    "select_and_rank",
    # Citations
    "to_citations",
    "citation_url",
    "PUBMED_BASE_URL",
    # Lookups
    "get_gene_interactions_for_drugs",
    "get_drug_interactions_for_genes",
    "InteractionResult",
    "split_names",
]
