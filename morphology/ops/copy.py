"""
Subtree copy: the traversal shared by split, join and prune-style filtering.
"""

from typing import Callable, NamedTuple, Optional
import logging

from ..core.tree import SegmentTree
from ..core.children import ChildIndex
from ..core.errors import NoSuchSegmentError

logger = logging.getLogger(__name__)


class CopyCursor(NamedTuple):
    """Pending copy: attach source segment ``id`` under destination ``parent``."""

    parent: Optional[int]
    id: int


CopyPredicate = Callable[[CopyCursor], bool]


def always(cursor: CopyCursor) -> bool:
    """Predicate that keeps every segment."""
    return True


def copy_subtree_if(
    tree: SegmentTree,
    start: CopyCursor,
    predicate: CopyPredicate = always,
    init: Optional[SegmentTree] = None,
) -> SegmentTree:
    """
    Copy the subtree of ``tree`` rooted at ``start.id`` into a new tree.

    Walks depth first with an explicit stack so deep morphologies do not
    hit the recursion limit. Children are copied in ascending source id
    order, so copying the same source twice gives identical results.

    Parameters
    ----------
    tree : SegmentTree
        Source tree (not modified)
    start : CopyCursor
        Attach source segment ``start.id`` under ``start.parent`` of the
        destination, then its descendants below it
    predicate : callable
        Called with each pending cursor. Returning False drops that
        segment and everything below it.
    init : SegmentTree, optional
        Tree to append to. It is copied first and never modified.

    Returns
    -------
    SegmentTree
        ``init`` (or an empty tree) extended with the copied segments

    Raises
    ------
    NoSuchSegmentError
        If ``start.id`` is not a segment of ``tree``
    InvalidParentError
        If ``start.parent`` is not None and not a segment of ``init``
    """
    start = CopyCursor(*start)
    if not 0 <= start.id < tree.size:
        raise NoSuchSegmentError(start.id)

    children_of = ChildIndex.from_tree(tree)
    segments = tree.segments
    result = init.copy() if init is not None else SegmentTree()

    todo = [start]
    while todo:
        node = todo.pop()
        if not predicate(node):
            continue
        segment = segments[node.id]
        current = result.append(node.parent, segment.prox, segment.dist, segment.tag)
        # Reversed so the smallest id is popped first.
        for child in reversed(children_of.children(node.id)):
            todo.append(CopyCursor(current, child))

    return result


__all__ = ["CopyCursor", "CopyPredicate", "always", "copy_subtree_if"]
