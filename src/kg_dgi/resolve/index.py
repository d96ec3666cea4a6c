"""
Alias indexes.

An AliasIndex maps every normalized alias (canonical names included) to its
canonical name. Indexes are built once per domain and then shared read-only
through an AliasIndexRegistry.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from kg_dgi.resolve.normalize import normalize_text

logger = logging.getLogger(__name__)

AliasTable = Mapping[str, Sequence[str]]


class Domain(str, Enum):
    """Entity domains with their own alias table."""
    DRUG = "drug"
    GENE = "gene"


@dataclass(frozen=True)
class AliasIndex:
    """Normalized alias → canonical name, plus the candidate key pool."""
    aliases: Mapping[str, str]
    keys: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, key: object) -> bool:
        return key in self.aliases

    def canonical(self, key: str) -> str | None:
        """Canonical name for an already-normalized key."""
        return self.aliases.get(key)


def build_index(table: AliasTable) -> AliasIndex:
    """
    Build an alias index from a canonical → aliases table.

    Each canonical name is inserted as its own alias before its aliases.
    When two canonical names share a normalized alias the later one wins;
    the key keeps its first position in the candidate pool.

    Args:
        table: Mapping of canonical name to alias list (not modified)

    Returns:
        Immutable AliasIndex
    """
    aliases: dict[str, str] = {}
    collisions = 0
    for canonical, alias_list in table.items():
        for alias in (canonical, *alias_list):
            key = normalize_text(alias)
            previous = aliases.get(key)
            if previous is not None and previous != canonical:
                collisions += 1
                logger.debug("Alias %r remapped from %r to %r", key, previous, canonical)
            aliases[key] = canonical

    if collisions:
        logger.debug("%d alias collisions resolved by last write", collisions)
    return AliasIndex(aliases=MappingProxyType(aliases), keys=tuple(aliases))


def alias_collisions(table: AliasTable) -> dict[str, list[str]]:
    """
    Normalized aliases claimed by more than one canonical name.

    build_index keeps the last claimant; this lists every claimant in
    table order so ambiguous aliases can be reviewed.
    """
    claimants: dict[str, list[str]] = {}
    for canonical, alias_list in table.items():
        for alias in (canonical, *alias_list):
            owners = claimants.setdefault(normalize_text(alias), [])
            if canonical not in owners:
                owners.append(canonical)
    return {key: owners for key, owners in claimants.items() if len(owners) > 1}


TableLoader = Callable[[Domain], AliasTable]


class AliasIndexRegistry:
    """
    Lazily built, process-lifetime alias indexes, one per domain.

    The first request for a domain loads its table and builds the index
    under a lock; later requests return the same object without locking.

    Usage:
        registry = AliasIndexRegistry(load_alias_table)
        index = registry.get(Domain.DRUG)
    """

    def __init__(self, loader: TableLoader):
        self._loader = loader
        self._indexes: dict[Domain, AliasIndex] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_tables(cls, tables: Mapping[Domain | str, AliasTable]) -> AliasIndexRegistry:
        """Registry over in-memory tables; unknown domains get an empty table."""
        by_domain = {Domain(domain): table for domain, table in tables.items()}
        return cls(lambda domain: by_domain.get(domain, {}))

    def get(self, domain: Domain | str) -> AliasIndex:
        """Return the index for `domain`, building it exactly once."""
        domain = Domain(domain)
        index = self._indexes.get(domain)
        if index is not None:
            return index

        with self._lock:
            index = self._indexes.get(domain)
            if index is None:
                table = self._loader(domain)
                index = build_index(table)
                self._indexes[domain] = index
                logger.debug("Built %s alias index with %d keys", domain.value, len(index))
        return index

    def is_built(self, domain: Domain | str) -> bool:
        return Domain(domain) in self._indexes


_default_registry: AliasIndexRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> AliasIndexRegistry:
    """Process-wide registry reading the alias files named in settings."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                from kg_dgi.resolve.tables import load_alias_table

                _default_registry = AliasIndexRegistry(load_alias_table)
    return _default_registry
