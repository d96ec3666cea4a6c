"""Pytest configuration and fixtures."""

import pytest

from kg_dgi.config import Settings
from kg_dgi.resolve import AliasIndexRegistry, Domain, build_index
from kg_dgi.tools import DomainRecord, Interaction


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests that call the live DGIdb API",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "live: mark test as calling the live DGIdb API")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless --run-live is provided."""
    if config.getoption("--run-live"):
        # --run-live given: do not skip live tests
        return

    skip_live = pytest.mark.skip(reason="Need --run-live option to run live API tests")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


# ---------------------------------------------------------------------------
# Alias tables
# ---------------------------------------------------------------------------


DRUG_TABLE = {
    "IMATINIB": ["Gleevec", "STI-571", "Glivec", "imatinib mesylate"],
    "DASATINIB": ["Sprycel", "BMS-354825"],
    "IBRUTINIB": ["Imbruvica", "PCI-32765"],
}

GENE_TABLE = {
    "BTK": ["AGMX1", "ATK", "XLA"],
    "ABL1": ["ABL", "c-ABL", "JTK7"],
    "EGFR": ["ERBB1", "HER1"],
}


@pytest.fixture
def drug_table():
    return {canonical: list(aliases) for canonical, aliases in DRUG_TABLE.items()}


@pytest.fixture
def gene_table():
    return {canonical: list(aliases) for canonical, aliases in GENE_TABLE.items()}


@pytest.fixture
def drug_index(drug_table):
    return build_index(drug_table)


@pytest.fixture
def gene_index(gene_table):
    return build_index(gene_table)


@pytest.fixture
def registry(drug_table, gene_table):
    return AliasIndexRegistry.from_tables({Domain.DRUG: drug_table, Domain.GENE: gene_table})


@pytest.fixture
def config():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def make_interaction(
    label: str = "X",
    score: float | None = None,
    approved: bool | None = None,
    pmids: list | None = None,
) -> Interaction:
    """Interaction whose drug name doubles as a label for assertions."""
    data: dict = {"interactionScore": score, "drug": {"name": label, "approved": approved}}
    if pmids is not None:
        data["publications"] = [{"pmid": p} for p in pmids]
    return Interaction.model_validate(data)


def make_record(name: str, size: int) -> DomainRecord:
    """Record with `size` interactions labelled name-0, name-1, ..."""
    return DomainRecord(
        name=name,
        interactions=[make_interaction(f"{name}-{i}", score=float(i)) for i in range(size)],
    )


def labels(interactions) -> list[str]:
    return [i.drug.name for i in interactions]
