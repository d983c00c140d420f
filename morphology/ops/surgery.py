"""
Split and join operations for segment trees.

split_at detaches a subtree into its own tree; join_at grafts a tree onto
another. Both build new trees with the subtree copier and leave their
inputs untouched.
"""

from typing import Optional, Tuple
import logging

from ..core.tree import SegmentTree
from ..core.children import ChildIndex
from ..core.errors import InvalidParentError
from .copy import CopyCursor, always, copy_subtree_if

logger = logging.getLogger(__name__)


def split_at(tree: SegmentTree, at: int) -> Tuple[SegmentTree, SegmentTree]:
    """
    Split a tree into the subtree rooted at ``at`` and everything else.

    Parameters
    ----------
    tree : SegmentTree
        Tree to split
    at : int
        Id of the first segment of the detached subtree

    Returns
    -------
    pre : SegmentTree
        All segments outside the subtree rooted at ``at``, renumbered
        root by root in depth-first order
    post : SegmentTree
        The subtree rooted at ``at``, with ``at`` as its root (id 0)

    Raises
    ------
    InvalidParentError
        If ``at`` is None or not a segment of ``tree``

    Examples
    --------
    >>> pre, post = split_at(tree, 3)
    >>> post.is_root(0)
    True
    """
    if at is None or not 0 <= at < tree.size:
        logger.debug(f"Cannot split tree of size {tree.size} at {at}")
        raise InvalidParentError(at, tree.size)

    post = copy_subtree_if(tree, CopyCursor(None, at), always)

    def outside_subtree(cursor: CopyCursor) -> bool:
        return cursor.id != at

    pre = SegmentTree()
    for root in ChildIndex.from_tree(tree).roots():
        pre = copy_subtree_if(tree, CopyCursor(None, root), outside_subtree, pre)

    logger.debug(
        f"Split tree of size {tree.size} at {at}: pre={pre.size}, post={post.size}"
    )
    return pre, post


def join_at(lhs: SegmentTree, at: Optional[int], rhs: SegmentTree) -> SegmentTree:
    """
    Graft the subtree rooted at segment 0 of ``rhs`` onto ``lhs``.

    Parameters
    ----------
    lhs : SegmentTree
        Tree to graft onto; its segments keep their ids
    at : int or None
        Segment of ``lhs`` that becomes the parent of the graft, or None
        to add the graft as a new root
    rhs : SegmentTree
        Tree providing the graft

    Returns
    -------
    SegmentTree
        ``lhs`` followed by the grafted segments, numbered in copy order.
        An empty ``rhs`` gives a plain copy of ``lhs``.

    Raises
    ------
    InvalidParentError
        If ``at`` is not None and not a segment of ``lhs``
    """
    if at is not None and not 0 <= at < lhs.size:
        logger.debug(f"Cannot join onto {at} in tree of size {lhs.size}")
        raise InvalidParentError(at, lhs.size)

    if rhs.empty:
        return lhs.copy()

    result = copy_subtree_if(rhs, CopyCursor(at, 0), always, lhs)
    logger.debug(f"Joined {result.size - lhs.size} segments onto {at}")
    return result


__all__ = ["split_at", "join_at"]
