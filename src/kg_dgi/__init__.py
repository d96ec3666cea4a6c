"""
kg_dgi: Drug-Gene Interaction lookups

Resolves free-text drug and gene names to the canonical names used by the
Drug-Gene Interaction Database (DGIdb), then ranks and budgets the returned
interactions across every requested entity:

    raw name → normalized alias → canonical name → DGIdb node → ranked interactions

Core constraints:
- Resolution and ranking are pure, deterministic functions over in-memory data
- Alias indexes are built once per domain and shared read-only
- Network access lives only in the DGIdb client
"""

__version__ = "0.1.0"
