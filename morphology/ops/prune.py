"""
Tag-based pruning for segment trees.

Removing a tagged region renumbers every segment after it. Ids are
remapped by recording, for each maximal run of consecutive pruned ids,
the first kept id after the run and how many ids were removed up to that
point. A kept parent is then shifted down by the offset of the last run
that ends at or before it.
"""

from typing import List, Tuple
import logging
import numpy as np

from ..core.tree import SegmentTree
from ..core.errors import UnprunedChildError

logger = logging.getLogger(__name__)


def tag_roots(tree: SegmentTree, tag: int) -> List[int]:
    """
    Ids where each maximal region of ``tag`` segments begins.

    A segment is a tag root if it carries ``tag`` and its parent is None
    or carries a different tag.
    """
    segments = tree.segments
    parents = tree.parents
    roots = []

    for i, seg in enumerate(segments):
        par = parents[i]
        if seg.tag == tag and (par is None or segments[par].tag != tag):
            roots.append(i)

    return roots


def prune_tag(tree: SegmentTree, tag: int) -> Tuple[SegmentTree, List[int]]:
    """
    Remove every segment tagged ``tag``.

    Pruned regions must be closed towards the leaves: a kept segment may
    not hang off a pruned one.

    Parameters
    ----------
    tree : SegmentTree
        Tree to prune (not modified)
    tag : int
        Tag to remove

    Returns
    -------
    pruned : SegmentTree
        Remaining segments in their original order with dense ids
    roots : List[int]
        Original ids of the tag roots that were removed (see tag_roots)

    Raises
    ------
    UnprunedChildError
        If a segment without ``tag`` has a parent tagged ``tag``
    """
    segments = tree.segments
    parents = tree.parents
    n = len(segments)

    upper_bounds = []
    offsets = []
    roots = []

    num_pruned = 0
    for i, seg in enumerate(segments):
        if seg.tag != tag:
            continue
        num_pruned += 1

        par = parents[i]
        if par is None or segments[par].tag != tag:
            roots.append(i)

        # End of a pruned run: record where kept ids resume.
        if i + 1 < n and segments[i + 1].tag != tag:
            upper_bounds.append(i + 1)
            offsets.append(num_pruned)

    upper_bounds = np.asarray(upper_bounds, dtype=np.int64)
    offsets = np.asarray(offsets, dtype=np.int64)

    out = SegmentTree()
    for i, seg in enumerate(segments):
        if seg.tag == tag:
            continue
        par = parents[i]
        if par is not None:
            if segments[par].tag == tag:
                logger.debug(f"Segment {i} would be orphaned by pruning tag {tag}")
                raise UnprunedChildError(par, seg.id, tag)
            run = int(np.searchsorted(upper_bounds, par, side="right"))
            if run > 0:
                par -= int(offsets[run - 1])
        out.append(par, seg.prox, seg.dist, seg.tag)

    logger.debug(
        f"Pruned {num_pruned} segments with tag {tag} "
        f"({len(upper_bounds)} interior runs, {len(roots)} regions)"
    )
    return out, roots


__all__ = ["prune_tag", "tag_roots"]
