"""
Exception hierarchy for kg_dgi.

Ordinary input variation (unknown names, missing scores) never raises.
These exceptions mark broken contracts: bad budgets, unreadable alias
tables, or a failed upstream query.
"""


class KgDgiError(Exception):
    """Base class for all kg_dgi errors."""


class AllocationError(KgDgiError, ValueError):
    """Budget, count or quota violated its non-negative contract."""


class AliasTableError(KgDgiError):
    """Alias table could not be read or has the wrong shape."""


class DGIdbError(KgDgiError):
    """DGIdb request failed or returned an unusable response."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []
