"""
Pydantic models for DGIdb records.

Known fields are named explicitly; anything else DGIdb returns is kept in
the model's extra fields and passed through untouched. Malformed scores or
approval flags become None instead of failing validation.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    """Base for upstream records: wire aliases accepted, unknown fields kept."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class InteractionType(_Record):
    """Typed relationship tag, e.g. inhibitor / INHIBITORY."""
    type: str | None = None
    directionality: str | None = None


class GeneRef(_Record):
    name: str | None = None


class DrugRef(_Record):
    name: str | None = None
    approved: bool | None = None

    @field_validator("approved", mode="before")
    @classmethod
    def _lenient_approved(cls, value: Any) -> bool | None:
        return value if isinstance(value, bool) else None


class Publication(_Record):
    pmid: int | str | None = None


class Source(_Record):
    source_db_name: str | None = Field(default=None, alias="sourceDbName")


class Interaction(_Record):
    """Single drug-gene interaction as returned by DGIdb."""
    interaction_score: float | None = Field(default=None, alias="interactionScore")
    interaction_types: list[InteractionType] = Field(
        default_factory=list, alias="interactionTypes"
    )
    gene: GeneRef | None = None
    drug: DrugRef | None = None
    publications: list[Publication] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)

    @field_validator("interaction_score", mode="before")
    @classmethod
    def _lenient_score(cls, value: Any) -> float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return None
        try:
            score = float(value)
        except (ValueError, OverflowError):
            return None
        return score if math.isfinite(score) else None

    @field_validator("interaction_types", "publications", "sources", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def approved(self) -> bool:
        """True only when the interacting drug is flagged approved."""
        return self.drug is not None and self.drug.approved is True

    @property
    def score(self) -> float:
        """Interaction score, 0 when missing."""
        return self.interaction_score if self.interaction_score is not None else 0.0

    @property
    def pmids(self) -> list[int | str]:
        """Publication identifiers in upstream order."""
        return [p.pmid for p in self.publications if p.pmid is not None and p.pmid != ""]


class DomainRecord(_Record):
    """A drug or gene node with its interactions."""
    name: str
    interactions: list[Interaction] = Field(default_factory=list)

    @field_validator("interactions", mode="before")
    @classmethod
    def _null_interactions(cls, value: Any) -> Any:
        return [] if value is None else value
