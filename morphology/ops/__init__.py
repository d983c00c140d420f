"""
Operations on segment trees.

Every operation returns a new tree and leaves its inputs unchanged:
    - morphology.ops.copy: subtree copy with a pruning predicate
    - morphology.ops.surgery: split_at, join_at
    - morphology.ops.prune: prune_tag, tag_roots
    - morphology.ops.compare: equivalent
    - morphology.ops.transform: apply
"""

from .copy import CopyCursor, always, copy_subtree_if
from .surgery import split_at, join_at
from .prune import prune_tag, tag_roots
from .compare import equivalent
from .transform import apply

__all__ = [
    "CopyCursor",
    "always",
    "copy_subtree_if",
    "split_at",
    "join_at",
    "prune_tag",
    "tag_roots",
    "equivalent",
    "apply",
]
