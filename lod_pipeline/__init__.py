"""
Linked open data helpers for static sites.

This package links entity names found in rendered paragraph HTML to their
data pages and emits JSON-LD describing pages and the entities they mention.
"""

__all__ = [
    "EntityIndex",
    "LODFilters",
    "SiteConfig",
]

__version__ = "0.1.0"

# Import policies and loaders to register them with the component registries
from lod_pipeline import policies  # noqa: F401
from lod_pipeline import loaders  # noqa: F401

from .config import SiteConfig  # noqa: E402
from .filters import LODFilters  # noqa: E402
from .index import EntityIndex  # noqa: E402
