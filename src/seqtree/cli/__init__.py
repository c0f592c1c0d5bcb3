"""
CLI commands for seqtree.

Provides the command-line interface for tree building.
"""

__all__ = ["main", "tree"]
