"""
Data models for seqtree.

Pydantic models for input taxa and tree building configuration.
"""

from seqtree.models.config import TreeConfig
from seqtree.models.taxa import Taxon, coerce_taxa

__all__ = [
    "Taxon",
    "TreeConfig",
    "coerce_taxa",
]
