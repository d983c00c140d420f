"""Core data structures for segment trees."""

from .types import Point, Segment
from .errors import (
    MorphologyError,
    InvalidParentError,
    NoSuchSegmentError,
    UnprunedChildError,
)
from .tree import SegmentTree
from .children import ChildIndex
from .isometry import Isometry, PointTransform

__all__ = [
    "Point",
    "Segment",
    "SegmentTree",
    "ChildIndex",
    "Isometry",
    "PointTransform",
    "MorphologyError",
    "InvalidParentError",
    "NoSuchSegmentError",
    "UnprunedChildError",
]
