"""
Parent -> children grouping for segment trees.

The parent list of a tree stores each edge once, from child to parent.
Traversals need the opposite direction, so ChildIndex inverts it into a
compact arena: ids sorted by parent (stably, so ascending within a group)
plus an offset table with one slot per possible parent. Roots are grouped
under the slot for ``None``.
"""

from typing import List, Optional, Sequence
import numpy as np


class ChildIndex:
    """
    Read-only child adjacency for a fixed parent list.

    Parameters
    ----------
    parents : sequence of int or None
        Parent id per segment, None for roots

    Examples
    --------
    >>> index = ChildIndex([None, 0, 0, 1])
    >>> index.children(0)
    [1, 2]
    >>> index.roots()
    [0]
    """

    def __init__(self, parents: Sequence[Optional[int]]):
        n = len(parents)
        # Slot 0 holds roots, slot p + 1 holds the children of p.
        slots = np.fromiter(
            (0 if p is None else p + 1 for p in parents),
            dtype=np.int64,
            count=n,
        )
        self._size = n
        self._order = np.argsort(slots, kind="stable")
        counts = np.bincount(slots, minlength=n + 1)
        self._offsets = np.zeros(n + 2, dtype=np.int64)
        np.cumsum(counts, out=self._offsets[1:])

    @classmethod
    def from_tree(cls, tree) -> "ChildIndex":
        """Build the index for a SegmentTree."""
        return cls(tree.parents)

    def children(self, parent: Optional[int]) -> List[int]:
        """Ids of the children of ``parent`` in ascending order."""
        slot = 0 if parent is None else parent + 1
        if not (parent is None or 0 < slot <= self._size):
            return []
        lo, hi = self._offsets[slot], self._offsets[slot + 1]
        return [int(i) for i in self._order[lo:hi]]

    def roots(self) -> List[int]:
        """Ids of all roots in ascending order."""
        return self.children(None)

    def __len__(self) -> int:
        return self._size


__all__ = ["ChildIndex"]
