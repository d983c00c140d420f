"""
Apply rigid transforms to segment trees.
"""

from ..core.tree import SegmentTree
from ..core.isometry import PointTransform


def apply(tree: SegmentTree, iso: PointTransform) -> SegmentTree:
    """
    Return a copy of ``tree`` with both ends of every segment transformed.

    Topology, ids and tags are unchanged.

    Parameters
    ----------
    tree : SegmentTree
        Tree to transform (not modified)
    iso : PointTransform
        Anything with ``apply(point) -> Point``, usually an Isometry
    """
    result = SegmentTree()
    for seg, parent in zip(tree.segments, tree.parents):
        result.append(parent, iso.apply(seg.prox), iso.apply(seg.dist), seg.tag)
    return result


__all__ = ["apply"]
