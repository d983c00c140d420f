"""
Rigid transforms (rotation followed by translation) for segment geometry.

Coordinate transformation:
    world_point = rotation @ local_point + translation

Radii are unchanged by a rigid transform. Anything with an
``apply(point) -> Point`` method satisfies PointTransform and can be used
with morphology.ops.transform.apply.
"""

from dataclasses import dataclass, field
from typing import Protocol, Sequence
import numpy as np
from scipy.spatial.transform import Rotation

from .types import Point


class PointTransform(Protocol):
    """Protocol for objects that map points to points."""

    def apply(self, point: Point) -> Point:
        ...


def _rotation_from_4x4_matrix(matrix: np.ndarray):
    """
    Split a 4x4 homogeneous matrix into rotation and translation.

    Assumes the matrix is in row-major format:
    [[R00, R01, R02, Tx],
     [R10, R11, R12, Ty],
     [R20, R21, R22, Tz],
     [0,   0,   0,   1 ]]

    Raises
    ------
    ValueError
        If matrix is not 4x4 or its 3x3 block is not a proper rotation.
    """
    matrix = np.array(matrix, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"Expected 4x4 matrix, got shape {matrix.shape}")

    block = matrix[:3, :3]
    if not np.allclose(block.T @ block, np.eye(3), atol=1e-9):
        raise ValueError("Matrix block is not orthonormal; an isometry cannot scale or shear")
    if np.linalg.det(block) < 0:
        raise ValueError("Matrix block is a reflection, not a rotation")

    return Rotation.from_matrix(block), matrix[:3, 3].copy()


@dataclass(eq=False)
class Isometry:
    """
    Rotation followed by translation.

    Parameters
    ----------
    rotation : scipy.spatial.transform.Rotation, optional
        Rotation applied first. Default identity.
    translation : np.ndarray, optional
        Translation vector [tx, ty, tz] applied second. Default [0, 0, 0].

    Composition reads left to right: ``(a * b).apply(p)`` equals
    ``b.apply(a.apply(p))``.

    Example
    -------
    >>> iso = Isometry.rotate(np.pi / 2, (0, 0, 1)) * Isometry.translate(1, 0, 0)
    >>> moved = iso.apply(Point(1, 0, 0, 0.5))  # rotated to (0, 1, 0), then to (1, 1, 0)
    """

    rotation: Rotation = field(default_factory=Rotation.identity)
    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.translation = np.array(self.translation, dtype=float)
        if self.translation.shape != (3,):
            raise ValueError(
                f"translation must have shape (3,), got {self.translation.shape}"
            )

    @classmethod
    def identity(cls) -> "Isometry":
        return cls()

    @classmethod
    def translate(cls, dx: float, dy: float, dz: float) -> "Isometry":
        return cls(translation=np.array([dx, dy, dz], dtype=float))

    @classmethod
    def rotate(cls, theta: float, axis: Sequence[float]) -> "Isometry":
        """Rotation by ``theta`` radians about ``axis`` through the origin."""
        axis = np.asarray(axis, dtype=float)
        norm = np.linalg.norm(axis)
        if norm < 1e-12:
            raise ValueError("Rotation axis must be non-zero")
        return cls(rotation=Rotation.from_rotvec(theta * axis / norm))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "Isometry":
        """Create from a 4x4 homogeneous (row-major) matrix."""
        rotation, translation = _rotation_from_4x4_matrix(matrix)
        return cls(rotation=rotation, translation=translation)

    def to_matrix(self) -> np.ndarray:
        """Return the 4x4 homogeneous (row-major) matrix."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation.as_matrix()
        matrix[:3, 3] = self.translation
        return matrix

    def apply(self, point: Point) -> Point:
        """Transform the position of ``point``; the radius is kept."""
        moved = self.rotation.apply(point.to_array()) + self.translation
        return Point.from_array(moved, point.radius)

    def __mul__(self, other: "Isometry") -> "Isometry":
        # x -> R2 (R1 x + t1) + t2
        if not isinstance(other, Isometry):
            return NotImplemented
        return Isometry(
            rotation=other.rotation * self.rotation,
            translation=other.rotation.apply(self.translation) + other.translation,
        )

    def inverse(self) -> "Isometry":
        inv = self.rotation.inv()
        return Isometry(rotation=inv, translation=-inv.apply(self.translation))


__all__ = ["Isometry", "PointTransform"]
