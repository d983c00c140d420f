"""
Structural checks for segment trees.
"""

from .topology import check_tree_invariants

__all__ = ["check_tree_invariants"]
