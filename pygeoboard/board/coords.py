"""
User coordinates of board elements.

Coordinates are stored homogeneously as ``[z, x, y]`` with ``z == 1`` for
finite points, which lets lines be computed as cross products.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygeoboard.core.validation import check_coordinates


class Coords:
    """Homogeneous user coordinates of a point on the board."""

    def __init__(self, pos: ArrayLike):
        xy = check_coordinates(pos, "pos")
        self.usr_coords: NDArray[np.floating[Any]] = np.array([1.0, xy[0], xy[1]])

    @property
    def xy(self) -> NDArray[np.floating[Any]]:
        """Euclidean (x, y) as a fresh array."""
        return self.usr_coords[1:].copy()

    def set(self, pos: ArrayLike) -> None:
        xy = np.asarray(pos, dtype=np.float64)
        self.usr_coords[1] = xy[0]
        self.usr_coords[2] = xy[1]

    def translate(self, delta: ArrayLike) -> None:
        self.usr_coords[1:] += np.asarray(delta, dtype=np.float64)

    def distance(self, other: Coords | ArrayLike) -> float:
        """Euclidean distance to another Coords or (x, y) pair."""
        if isinstance(other, Coords):
            other_xy = other.usr_coords[1:]
        else:
            other_xy = np.asarray(other, dtype=np.float64)
        return float(np.hypot(*(self.usr_coords[1:] - other_xy)))

    def __repr__(self) -> str:
        return f"Coords(x={self.usr_coords[1]:g}, y={self.usr_coords[2]:g})"
