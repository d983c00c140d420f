"""
Morphology Surgery - segment trees for branching cell morphologies

A neuron (or any branching cell) is described as a forest of tagged line
segments with dense ids and parents that always precede their children.
This package stores such forests and performs surgery on them: splitting
at a segment, grafting one tree onto another, pruning tagged regions,
comparing trees up to id and sibling order, and moving them rigidly.

Example:
    >>> from morphology import SegmentTree, Point, split_at, join_at, equivalent
    >>>
    >>> tree = SegmentTree()
    >>> soma = tree.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), tag=1)
    >>> axon = tree.extend_branch(soma, Point(2, 0, 0, 0.5), tag=2)
    >>> dend = tree.extend_branch(soma, Point(1, 1, 0, 0.5), tag=3)
    >>>
    >>> pre, post = split_at(tree, axon)
    >>> equivalent(join_at(pre, soma, post), tree)
    True
"""

from .core import (
    Point,
    Segment,
    SegmentTree,
    ChildIndex,
    Isometry,
    PointTransform,
    MorphologyError,
    InvalidParentError,
    NoSuchSegmentError,
    UnprunedChildError,
)
from .ops import (
    copy_subtree_if,
    split_at,
    join_at,
    prune_tag,
    tag_roots,
    equivalent,
    apply,
)
from .policies import RenderPolicy, InvariantCheckPolicy
from .render import render_tree

__version__ = "0.1.0"

__all__ = [
    # Data structures
    "Point",
    "Segment",
    "SegmentTree",
    "ChildIndex",
    "Isometry",
    "PointTransform",
    # Operations
    "copy_subtree_if",
    "split_at",
    "join_at",
    "prune_tag",
    "tag_roots",
    "equivalent",
    "apply",
    # Rendering and configuration
    "render_tree",
    "RenderPolicy",
    "InvariantCheckPolicy",
    # Errors
    "MorphologyError",
    "InvalidParentError",
    "NoSuchSegmentError",
    "UnprunedChildError",
]
