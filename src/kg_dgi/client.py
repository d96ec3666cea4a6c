"""
DGIdb GraphQL client.

Thin transport over https://dgidb.org/api/graphql. Transport errors are
retried with exponential backoff; HTTP and GraphQL errors surface as
DGIdbError.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from kg_dgi.config import Settings, settings as default_settings
from kg_dgi.errors import DGIdbError
from kg_dgi.tools.models import DomainRecord

logger = logging.getLogger(__name__)

_INTERACTION_FIELDS = """
                interactionScore
                interactionTypes {
                    type
                    directionality
                }
                publications {
                    pmid
                }
                sources {
                    sourceDbName
                }
"""

DRUGS_QUERY = (
    """
query drugs($names: [String!]) {
    drugs(names: $names) {
        nodes {
            name
            interactions {
                gene {
                    name
                }
"""
    + _INTERACTION_FIELDS
    + """
            }
        }
    }
}
"""
)

GENES_QUERY = (
    """
query genes($names: [String!]) {
    genes(names: $names) {
        nodes {
            name
            interactions {
                drug {
                    name
                    approved
                }
"""
    + _INTERACTION_FIELDS
    + """
            }
        }
    }
}
"""
)


class DGIdbClient:
    """
    Client for the DGIdb GraphQL API.

    Usage:
        with DGIdbClient() as client:
            nodes = client.fetch_drug_nodes(["IMATINIB"])
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
        max_attempts: int = 3,
        backoff: float = 1.0,
        transport: httpx.BaseTransport | None = None,
        config: Settings | None = None,
    ):
        config = config or default_settings
        self.base_url = base_url or config.api_url
        self.max_attempts = max_attempts
        self.backoff = backoff
        self._client = httpx.Client(
            timeout=timeout or config.request_timeout,
            headers={
                "Content-Type": "application/json",
                "User-Agent": user_agent or config.user_agent,
            },
            transport=transport,
        )

    def __enter__(self) -> DGIdbClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff, min=self.backoff, max=30 * self.backoff),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._client.post, self.base_url, json=payload)

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Run a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The response `data` object

        Raises:
            DGIdbError: Transport failure, HTTP error status, GraphQL errors,
                or a response without `data`
        """
        try:
            response = self._post({"query": query, "variables": variables or {}})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DGIdbError(f"DGIdb returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise DGIdbError(f"DGIdb request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise DGIdbError("DGIdb returned a non-JSON response") from e

        if not isinstance(body, dict):
            raise DGIdbError("DGIdb returned an unexpected response")
        errors = body.get("errors")
        if errors:
            raise DGIdbError(f"DGIdb query failed: {errors}", errors=errors)
        data = body.get("data")
        if not isinstance(data, dict):
            raise DGIdbError("DGIdb response has no data")
        return data

    def _fetch_nodes(self, field: str, query: str, names: Sequence[str]) -> list[DomainRecord]:
        if not names:
            return []
        data = self.execute(query, {"names": list(names)})
        container = data.get(field)
        if not isinstance(container, dict):
            raise DGIdbError(f"DGIdb response has no {field}")
        nodes = container.get("nodes") or []
        try:
            records = [DomainRecord.model_validate(node) for node in nodes]
        except ValidationError as e:
            raise DGIdbError(f"DGIdb returned malformed {field} nodes: {e}") from e
        logger.debug("Fetched %d %s nodes for %s", len(records), field, list(names))
        return records

    def fetch_drug_nodes(self, names: Sequence[str]) -> list[DomainRecord]:
        """Drug nodes (with gene interactions) for the given drug names."""
        return self._fetch_nodes("drugs", DRUGS_QUERY, names)

    def fetch_gene_nodes(self, names: Sequence[str]) -> list[DomainRecord]:
        """Gene nodes (with drug interactions) for the given gene names."""
        return self._fetch_nodes("genes", GENES_QUERY, names)
