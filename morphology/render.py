"""
Debug text form of segment trees.

Example (three segments, default policy)::

    (segment_tree (
      (segment 0 (point 0 0 0 1) (point 1 0 0 1) 1)
      (segment 1 (point 1 0 0 1) (point 2 0 0 1) 2)
      (segment 2 (point 1 0 0 1) (point 1 1 0 1) 3))
      (npos 0 0))

This form is for logs and test failure messages only; nothing parses it.
"""

from typing import Optional, TYPE_CHECKING

from .core.types import Point, Segment
from .policies import RenderPolicy, require_valid

if TYPE_CHECKING:
    from .core.tree import SegmentTree


def render_point(point: Point, policy: Optional[RenderPolicy] = None) -> str:
    policy = policy or RenderPolicy()
    values = (point.x, point.y, point.z, point.radius)
    return "(point " + " ".join(format(v, policy.float_format) for v in values) + ")"


def render_segment(segment: Segment, policy: Optional[RenderPolicy] = None) -> str:
    policy = policy or RenderPolicy()
    return (
        f"(segment {segment.id} "
        f"{render_point(segment.prox, policy)} "
        f"{render_point(segment.dist, policy)} "
        f"{segment.tag})"
    )


def render_tree(tree: "SegmentTree", policy: Optional[RenderPolicy] = None) -> str:
    """
    Render a tree as a segment listing followed by a parent listing.

    Parameters
    ----------
    tree : SegmentTree
        Tree to render
    policy : RenderPolicy, optional
        Formatting options (default: RenderPolicy())

    Returns
    -------
    str
        One line for small trees, otherwise one segment per indented line
    """
    policy = policy or RenderPolicy()
    require_valid(policy)

    segments = [render_segment(seg, policy) for seg in tree.segments]
    parents = " ".join(
        policy.none_token if p is None else str(p) for p in tree.parents
    )

    if tree.size <= policy.one_line_max_segments:
        return f"(segment_tree ({' '.join(segments)}) ({parents}))"

    newline = "\n" + policy.indent
    return (
        f"(segment_tree ({newline}{newline.join(segments)})"
        f"{newline}({parents}))"
    )


__all__ = ["render_point", "render_segment", "render_tree"]
