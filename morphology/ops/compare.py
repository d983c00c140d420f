"""
Structural comparison of segment trees.
"""

from typing import List, Optional, Tuple
import logging

from ..core.tree import SegmentTree
from ..core.children import ChildIndex
from ..core.types import Segment

logger = logging.getLogger(__name__)


def _sorted_children(
    cursor: Optional[int],
    segments: Tuple[Segment, ...],
    children_of: ChildIndex,
) -> List[Segment]:
    """Children of ``cursor`` ordered by geometry and tag, ignoring ids."""
    return sorted(
        (segments[i] for i in children_of.children(cursor)),
        key=Segment.key,
    )


def equivalent(a: SegmentTree, b: SegmentTree) -> bool:
    """
    Check whether two trees are equal up to ids and sibling order.

    Starting from the two root sets, the children of each matched pair are
    sorted by (prox, dist, tag) and compared position by position; matching
    children are queued as the next pairs to compare.

    Siblings with identical geometry and tag are paired in their original
    id order, so trees that differ only by swapping the subtrees below such
    twins can compare unequal.

    Parameters
    ----------
    a, b : SegmentTree
        Trees to compare

    Returns
    -------
    bool
        True if every level of both trees matches
    """
    if a.size != b.size:
        return False

    a_children_of = ChildIndex.from_tree(a)
    b_children_of = ChildIndex.from_tree(b)
    a_segments = a.segments
    b_segments = b.segments

    todo: List[Tuple[Optional[int], Optional[int]]] = [(None, None)]
    while todo:
        a_cursor, b_cursor = todo.pop()
        a_children = _sorted_children(a_cursor, a_segments, a_children_of)
        b_children = _sorted_children(b_cursor, b_segments, b_children_of)
        if len(a_children) != len(b_children):
            return False
        for a_seg, b_seg in zip(a_children, b_children):
            if a_seg.key() != b_seg.key():
                logger.debug(f"Segments {a_seg.id} and {b_seg.id} differ")
                return False
            todo.append((a_seg.id, b_seg.id))

    return True


__all__ = ["equivalent"]
