"""
Shared utilities for the LOD pipeline.
"""

from lod_pipeline.utils.spans import filter_spans

__all__ = [
    "filter_spans",
]
