"""
Alias table loading.

Alias tables are JSON objects mapping a canonical name to its aliases:

    {"IMATINIB": ["Gleevec", "STI-571", "imatinib mesylate"], ...}
"""

import json
import logging
from pathlib import Path

from kg_dgi.config import settings
from kg_dgi.errors import AliasTableError
from kg_dgi.resolve.index import AliasTable, Domain

logger = logging.getLogger(__name__)


def alias_table_path(domain: Domain | str) -> Path:
    """Configured alias file for a domain."""
    domain = Domain(domain)
    if domain is Domain.DRUG:
        return settings.drug_alias_path
    return settings.gene_alias_path


def read_alias_table(path: Path) -> dict[str, list[str]]:
    """
    Read and validate an alias table from JSON.

    Args:
        path: JSON file with a {canonical: [alias, ...]} object

    Returns:
        Dict in file order

    Raises:
        AliasTableError: File missing, not JSON, or wrong shape
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise AliasTableError(f"Alias table not found: {path}") from e
    except json.JSONDecodeError as e:
        raise AliasTableError(f"Alias table is not valid JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise AliasTableError(f"Alias table must be a JSON object: {path}")

    table: dict[str, list[str]] = {}
    for canonical, aliases in data.items():
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise AliasTableError(f"Aliases for {canonical!r} must be a list of strings: {path}")
        table[canonical] = aliases

    logger.debug("Loaded %d canonical names from %s", len(table), path)
    return table


def load_alias_table(domain: Domain | str) -> AliasTable:
    """Loader for AliasIndexRegistry using the configured file per domain."""
    return read_alias_table(alias_table_path(domain))
