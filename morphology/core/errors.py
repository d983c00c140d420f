"""
Exceptions raised by segment tree construction and surgery.
"""

from typing import Optional


class MorphologyError(Exception):
    """Base exception for segment tree errors."""
    pass


class InvalidParentError(MorphologyError, ValueError):
    """Raised when a parent id is neither None nor an existing segment."""
    
    def __init__(self, parent: Optional[int], size: int):
        self.parent = parent
        self.size = size
        shown = "npos" if parent is None else parent
        super().__init__(
            f"Invalid segment parent {shown} for a segment tree of size {size}"
        )


class NoSuchSegmentError(MorphologyError, IndexError):
    """Raised when a query references a segment id past the end of the tree."""
    
    def __init__(self, segment_id: int):
        self.segment_id = segment_id
        super().__init__(f"No segment with id {segment_id}")


class UnprunedChildError(MorphologyError, ValueError):
    """Raised when pruning a tag would leave a kept segment without its parent."""
    
    def __init__(self, parent: int, child: int, tag: int):
        self.parent = parent
        self.child = child
        self.tag = tag
        super().__init__(
            f"Segment {child} is not tagged {tag} but its parent {parent} is; "
            "children of pruned segments must be pruned too"
        )


__all__ = [
    "MorphologyError",
    "InvalidParentError",
    "NoSuchSegmentError",
    "UnprunedChildError",
]
