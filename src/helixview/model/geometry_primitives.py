"""
Geometric Primitives for the helix-local frame.

The helix axis is Y. Rotations "around the helix" happen in the X/Z plane.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def rotate_in_plane(u: float, v: float, angle_deg: float) -> tuple[float, float]:
    """
    Rotate the planar coordinate (u, v) counter-clockwise by `angle_deg`.

    Used with u = radial and v = tangential offset to place atoms around the
    helix axis; the result maps to world (x, z).
    """
    rad = deg2rad(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return u * cos_a - v * sin_a, u * sin_a + v * cos_a


@dataclass(frozen=True)
class Point3D:
    """A point in the helix-local frame."""
    x: float
    y: float
    z: float

    def planar_distance_to(self, other: Point3D) -> float:
        """Distance in the horizontal plane, ignoring the helix-axis coordinate."""
        return math.hypot(self.x - other.x, self.z - other.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
