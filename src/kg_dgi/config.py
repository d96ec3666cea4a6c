"""
Configuration management for kg_dgi.

Uses pydantic-settings for environment variable loading and validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KG_DGI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # DGIdb API
    api_url: str = Field(
        default="https://dgidb.org/api/graphql",
        description="DGIdb GraphQL endpoint",
    )
    user_agent: str = Field(default="kg-dgi/0.1.0", description="User-Agent header")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    # Resolution
    similarity_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum bigram similarity to accept an alias match",
    )

    # Output budgets
    single_entity_budget: int = Field(
        default=40,
        ge=0,
        description="Interaction budget when one entity is requested",
    )
    multi_entity_budget: int = Field(
        default=100,
        ge=0,
        description="Shared interaction budget across several entities",
    )
    citation_base_url: str = Field(
        default="https://pubmed.ncbi.nlm.nih.gov/",
        description="Prefix for publication citation links",
    )

    # Alias tables
    data_dir: Path = Field(default=Path("data"), description="Root data directory")
    drug_alias_file: Path | None = Field(
        default=None,
        description="Drug alias JSON (defaults to data/aliases/drug_aliases.json)",
    )
    gene_alias_file: Path | None = Field(
        default=None,
        description="Gene alias JSON (defaults to data/aliases/gene_aliases.json)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def alias_dir(self) -> Path:
        """Directory holding the alias tables."""
        return self.data_dir / "aliases"

    @property
    def drug_alias_path(self) -> Path:
        """Drug alias table location."""
        return self.drug_alias_file or self.alias_dir / "drug_aliases.json"

    @property
    def gene_alias_path(self) -> Path:
        """Gene alias table location."""
        return self.gene_alias_file or self.alias_dir / "gene_aliases.json"

    def budget_for(self, name_count: int) -> int:
        """Total interaction budget for a request naming `name_count` entities."""
        return self.single_entity_budget if name_count == 1 else self.multi_entity_budget


# Global settings instance
settings = Settings()
