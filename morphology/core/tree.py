"""
Segment tree: append-only storage for a forest of tagged segments.
"""

from typing import List, Optional, Tuple
import logging

from .types import Point, Segment
from .errors import InvalidParentError, NoSuchSegmentError

logger = logging.getLogger(__name__)


class SegmentTree:
    """
    Forest of segments with dense ids and parent-before-child ordering.

    Segments are stored in id order alongside a parallel list of parent ids
    (None for roots) and a per-segment child count. The only mutator is
    append; removal and reordering are done by building a new tree
    (see morphology.ops).

    Invariants
    ----------
    - The i-th appended segment has id i.
    - Every parent is None or strictly less than its child's id.
    - Child counts always agree with the parent list.
    """

    def __init__(self):
        self._segments: List[Segment] = []
        self._parents: List[Optional[int]] = []
        self._child_counts: List[int] = []

    def reserve(self, n: int) -> None:
        """Capacity hint. Python lists grow on demand so this does nothing."""
        pass

    def append(
        self,
        parent: Optional[int],
        prox: Point,
        dist: Point,
        tag: int,
    ) -> int:
        """
        Append a segment under ``parent`` and return its id.

        Parameters
        ----------
        parent : int or None
            Id of an existing segment, or None to start a new root
        prox, dist : Point
            Proximal and distal end points
        tag : int
            Region label

        Returns
        -------
        int
            Id of the new segment (always the previous size)

        Raises
        ------
        InvalidParentError
            If ``parent`` is not None and not an existing id
        """
        if parent is not None and not 0 <= parent < self.size:
            logger.debug(f"Rejecting append under parent {parent} (size {self.size})")
            raise InvalidParentError(parent, self.size)

        seg_id = self.size
        self._segments.append(Segment(seg_id, prox, dist, tag))
        self._parents.append(parent)
        self._child_counts.append(0)
        if parent is not None:
            self._child_counts[parent] += 1

        return seg_id

    def extend_branch(self, parent: Optional[int], dist: Point, tag: int) -> int:
        """
        Append a segment whose proximal point is the parent's distal point.

        A root needs both ends, so ``parent`` must be an existing id.
        """
        if parent is None or not 0 <= parent < self.size:
            raise InvalidParentError(parent, self.size)
        return self.append(parent, self._segments[parent].dist, dist, tag)

    @property
    def size(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def empty(self) -> bool:
        return not self._segments

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Segments in id order."""
        return tuple(self._segments)

    @property
    def parents(self) -> Tuple[Optional[int], ...]:
        """Parent ids in id order; None marks a root."""
        return tuple(self._parents)

    def _check_id(self, i: int) -> None:
        if not 0 <= i < self.size:
            raise NoSuchSegmentError(i)

    def is_root(self, i: int) -> bool:
        self._check_id(i)
        return self._parents[i] is None

    def is_fork(self, i: int) -> bool:
        self._check_id(i)
        return self._child_counts[i] >= 2

    def is_terminal(self, i: int) -> bool:
        self._check_id(i)
        return self._child_counts[i] == 0

    def num_children(self, i: int) -> int:
        self._check_id(i)
        return self._child_counts[i]

    def copy(self) -> "SegmentTree":
        """Return an independent copy; segments are immutable and shared."""
        result = SegmentTree()
        result._segments = list(self._segments)
        result._parents = list(self._parents)
        result._child_counts = list(self._child_counts)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentTree):
            return NotImplemented
        return self._segments == other._segments and self._parents == other._parents

    __hash__ = None

    def __str__(self) -> str:
        from ..render import render_tree
        return render_tree(self)

    def __repr__(self) -> str:
        roots = sum(1 for p in self._parents if p is None)
        return f"SegmentTree(size={self.size}, roots={roots})"


__all__ = ["SegmentTree"]
