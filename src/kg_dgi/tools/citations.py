"""
Citation links.

Replaces raw publication identifiers with PubMed links and drops the raw
field from the output record.
"""

from collections.abc import Sequence
from typing import Any

from kg_dgi.tools.models import Interaction

PUBMED_BASE_URL = "https://pubmed.ncbi.nlm.nih.gov/"


def citation_url(pmid: int | str, base_url: str = PUBMED_BASE_URL) -> str:
    return f"{base_url}{pmid}/"


def to_citations(
    interactions: Sequence[Interaction],
    base_url: str = PUBMED_BASE_URL,
) -> list[dict[str, Any]]:
    """
    Convert interactions to output dicts with citation links.

    Args:
        interactions: Ranked interactions
        base_url: Prefix placed before each identifier

    Returns:
        One dict per interaction, with wire field names, a `citations`
        list (possibly empty) and no `publications` field
    """
    out = []
    for interaction in interactions:
        record = interaction.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"publications"},
        )
        record["citations"] = [citation_url(pmid, base_url) for pmid in interaction.pmids]
        out.append(record)
    return out
