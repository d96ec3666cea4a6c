"""Tests for configuration module."""

from pathlib import Path

from kg_dgi.config import Settings


def test_default_settings():
    """Test that default settings are valid."""
    s = Settings(_env_file=None)
    assert s.api_url == "https://dgidb.org/api/graphql"
    assert s.similarity_threshold == 0.7
    assert s.single_entity_budget == 40
    assert s.multi_entity_budget == 100
    assert s.citation_base_url == "https://pubmed.ncbi.nlm.nih.gov/"
    assert s.log_level == "INFO"


def test_alias_paths():
    """Test that alias table paths derive from data_dir."""
    s = Settings(_env_file=None, data_dir=Path("/srv/dgi"))
    assert s.drug_alias_path == Path("/srv/dgi/aliases/drug_aliases.json")
    assert s.gene_alias_path == Path("/srv/dgi/aliases/gene_aliases.json")


def test_alias_path_override():
    """Test that explicit alias files win over data_dir."""
    s = Settings(_env_file=None, drug_alias_file=Path("civic_drugs.json"))
    assert s.drug_alias_path == Path("civic_drugs.json")
    assert s.gene_alias_path.name == "gene_aliases.json"


def test_budget_for():
    """Test single versus multi entity budgets."""
    s = Settings(_env_file=None)
    assert s.budget_for(1) == 40
    assert s.budget_for(2) == 100
    assert s.budget_for(0) == 100


def test_env_override(monkeypatch):
    """Test that KG_DGI_ environment variables are read."""
    monkeypatch.setenv("KG_DGI_MULTI_ENTITY_BUDGET", "50")
    monkeypatch.setenv("KG_DGI_SIMILARITY_THRESHOLD", "0.85")
    s = Settings(_env_file=None)
    assert s.multi_entity_budget == 50
    assert s.similarity_threshold == 0.85
