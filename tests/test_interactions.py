"""Tests for the drug/gene interaction lookup tools (no network)."""

import pytest

from conftest import make_interaction, make_record
from kg_dgi.errors import DGIdbError
from kg_dgi.tools import (
    DomainRecord,
    InteractionResult,
    get_drug_interactions_for_genes,
    get_gene_interactions_for_drugs,
    split_names,
)


class FakeClient:
    """Stands in for DGIdbClient, returning canned nodes."""

    def __init__(self, nodes=None, error: Exception | None = None):
        self.nodes = nodes or []
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    def _fetch(self, kind: str, names: list[str]) -> list[DomainRecord]:
        self.calls.append((kind, list(names)))
        if self.error:
            raise self.error
        return self.nodes

    def fetch_drug_nodes(self, names):
        return self._fetch("drugs", names)

    def fetch_gene_nodes(self, names):
        return self._fetch("genes", names)


class TestSplitNames:
    """Tests for split_names."""

    def test_comma_separated(self):
        assert split_names(" gleevec, sprycel ,,  ") == ["gleevec", "sprycel"]

    def test_list_input(self):
        assert split_names(["a, b", "c", " "]) == ["a", "b", "c"]

    def test_empty(self):
        assert split_names("") == []


class TestGeneInteractionsForDrugs:
    """Tests for get_gene_interactions_for_drugs."""

    def test_resolves_before_fetching(self, registry, config):
        client = FakeClient([make_record("IMATINIB", 2), make_record("DASATINIB", 2)])
        result = get_gene_interactions_for_drugs(
            "gleevec, Sprycel", client=client, registry=registry, config=config
        )
        assert client.calls == [("drugs", ["IMATINIB", "DASATINIB"])]
        assert result.requested == ["gleevec", "Sprycel"]
        assert result.resolved == ["IMATINIB", "DASATINIB"]
        assert not result.is_error
        assert list(result.interactions) == ["IMATINIB", "DASATINIB"]

    def test_unresolved_name_falls_back_to_raw(self, registry, config):
        client = FakeClient([make_record("ASPIRIN", 1)])
        result = get_gene_interactions_for_drugs(
            "aspirin", client=client, registry=registry, config=config
        )
        assert result.resolved == ["aspirin"]
        assert list(result.interactions) == ["aspirin"]

    def test_single_name_budget(self, registry, config):
        client = FakeClient([make_record("IMATINIB", 60)])
        result = get_gene_interactions_for_drugs(
            "imatinib", client=client, registry=registry, config=config
        )
        assert len(result.interactions["IMATINIB"]) == config.single_entity_budget == 40

    def test_multi_name_budget(self, registry, config):
        client = FakeClient([make_record("IMATINIB", 3), make_record("DASATINIB", 200)])
        result = get_gene_interactions_for_drugs(
            ["imatinib", "dasatinib"], client=client, registry=registry, config=config
        )
        assert len(result.interactions["IMATINIB"]) == 3
        assert len(result.interactions["DASATINIB"]) == 97

    def test_duplicate_names_use_multi_name_budget(self, registry, config):
        """Budget is sized from the requested names before duplicates collapse."""
        client = FakeClient([make_record("IMATINIB", 60)])
        result = get_gene_interactions_for_drugs(
            "imatinib, gleevec", client=client, registry=registry, config=config
        )
        assert result.resolved == ["IMATINIB", "IMATINIB"]
        assert list(result.interactions) == ["IMATINIB"]
        assert len(result.interactions["IMATINIB"]) == 60

    def test_output_has_citations(self, registry, config):
        record = DomainRecord(
            name="IMATINIB",
            interactions=[make_interaction("ABL1", 5.0, pmids=[11287972])],
        )
        result = get_gene_interactions_for_drugs(
            "imatinib", client=FakeClient([record]), registry=registry, config=config
        )
        item = result.interactions["IMATINIB"][0]
        assert item["citations"] == ["https://pubmed.ncbi.nlm.nih.gov/11287972/"]
        assert "publications" not in item
        assert item["interactionScore"] == 5.0

    def test_no_nodes(self, registry, config):
        result = get_gene_interactions_for_drugs(
            "gleevec, aspirin", client=FakeClient([]), registry=registry, config=config
        )
        assert result.is_error
        assert result.error == "No drug nodes found for: IMATINIB, aspirin"
        assert result.to_dict()["error"] == result.error

    def test_fetch_error_becomes_error_result(self, registry, config):
        client = FakeClient(error=DGIdbError("DGIdb returned HTTP 503"))
        result = get_gene_interactions_for_drugs(
            "imatinib", client=client, registry=registry, config=config
        )
        assert result.is_error
        assert "503" in result.error

    def test_no_names_skips_fetch(self, registry, config):
        client = FakeClient([make_record("IMATINIB", 1)])
        result = get_gene_interactions_for_drugs(" , ", client=client, registry=registry, config=config)
        assert result.is_error
        assert client.calls == []

    def test_unmatched_names_left_out(self, registry, config):
        client = FakeClient([make_record("IMATINIB", 2)])
        result = get_gene_interactions_for_drugs(
            "imatinib, dasatinib", client=client, registry=registry, config=config
        )
        assert list(result.interactions) == ["IMATINIB"]
        assert result.to_dict() == result.interactions

    def test_opens_and_closes_default_client(self, registry, config, monkeypatch):
        created = []

        class StubClient(FakeClient):
            def __init__(self, config=None):
                super().__init__([make_record("IMATINIB", 1)])
                self.closed = False
                created.append(self)

            def close(self):
                self.closed = True

        monkeypatch.setattr("kg_dgi.client.DGIdbClient", StubClient)
        result = get_gene_interactions_for_drugs("imatinib", registry=registry, config=config)
        assert not result.is_error
        assert len(created) == 1
        assert created[0].closed


class TestDrugInteractionsForGenes:
    """Tests for get_drug_interactions_for_genes."""

    def test_uses_gene_index_and_query(self, registry, config):
        node = DomainRecord(
            name="BTK",
            interactions=[
                make_interaction("UNAPPROVED", 9.0, False),
                make_interaction("IBRUTINIB", 1.0, True),
            ],
        )
        client = FakeClient([node])
        result = get_drug_interactions_for_genes("xla", client=client, registry=registry, config=config)
        assert client.calls == [("genes", ["BTK"])]
        assert [i["drug"]["name"] for i in result.interactions["BTK"]] == ["IBRUTINIB", "UNAPPROVED"]

    def test_no_nodes_message(self, registry, config):
        result = get_drug_interactions_for_genes(
            "BTK", client=FakeClient([]), registry=registry, config=config
        )
        assert result.error == "No gene nodes found for: BTK"


class TestInteractionResult:
    """Tests for InteractionResult."""

    @pytest.mark.parametrize("error, expected", [(None, False), ("boom", True)])
    def test_is_error(self, error, expected):
        assert InteractionResult(requested=[], resolved=[], error=error).is_error is expected
