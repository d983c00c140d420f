"""
Geometric value types for segment trees.

A Point is a 3D location with a radius; a Segment is a tagged line element
between two points. Both are immutable so they can be shared freely between
trees produced by copy, split, join and prune.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True, order=True)
class Point:
    """
    3D point with a radius.
    
    Ordering is lexicographic over (x, y, z, radius), which gives segments
    a total order independent of their ids.
    """
    
    x: float
    y: float
    z: float
    radius: float

    def __post_init__(self):
        for name in ("x", "y", "z", "radius"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def to_array(self) -> np.ndarray:
        """Return the position (without radius) as a length-3 array."""
        return np.array([self.x, self.y, self.z], dtype=float)
    
    @classmethod
    def from_array(cls, arr: np.ndarray, radius: float) -> "Point":
        """Create from a length-3 position array and a radius."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(radius))


@dataclass(frozen=True)
class Segment:
    """
    Line segment in a segment tree.
    
    Attributes
    ----------
    id : int
        Position of the segment in its tree
    prox : Point
        Proximal end (closest to the root)
    dist : Point
        Distal end
    tag : int
        Region label (soma, axon, dendrite, ...)
    """
    
    id: int
    prox: Point
    dist: Point
    tag: int
    
    def key(self) -> Tuple[Point, Point, int]:
        """Comparison key that ignores the id."""
        return (self.prox, self.dist, self.tag)


__all__ = ["Point", "Segment"]
