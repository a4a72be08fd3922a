"""
Free points.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from pygeoboard.core.constants import OBJECT_TYPE_POINT
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.core.validation import check_coordinates
from pygeoboard.board.coords import Coords
from pygeoboard.board.element import GeometryElement

if TYPE_CHECKING:
    from pygeoboard.board.board import Board
    from pygeoboard.board.group import Group


class Point(GeometryElement):
    """A point given by its user coordinates."""

    def __init__(
        self,
        board: Board,
        coords: ArrayLike,
        attributes: dict[str, Any],
        el_type: str = OBJECT_TYPE_POINT,
    ):
        self.coords = Coords(coords)
        self.groups: list[Group] = []
        super().__init__(board, attributes, el_type)
        self.parents = self.coords.xy.tolist()

    def x(self) -> float:
        return float(self.coords.usr_coords[1])

    def y(self) -> float:
        return float(self.coords.usr_coords[2])

    def dist(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return self.coords.distance(other.coords)

    def move_to(self, pos: ArrayLike) -> Point:
        """
        Move the point to ``pos`` and update the board.

        Every group containing the point is translated by the same offset.
        """
        xy = check_coordinates(pos, "pos")
        delta = xy - self.coords.xy
        self.coords.set(xy)
        for group in self.groups:
            group.translate(delta, source=self)
        self.board.update()
        return self

    def remove(self) -> None:
        for group in list(self.groups):
            group.remove_point(self)
        super().remove()


def create_point(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Point:
    """
    Create a free point.

    Parents: ``[x, y]`` or ``[[x, y]]``.
    """
    if len(parents) == 1:
        parents = list(np.ravel(parents[0]))
    if len(parents) != 2:
        raise ElementError(
            f"point: expected parents [x, y], got {parents!r}",
            el_type=OBJECT_TYPE_POINT,
        )
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_POINT)
    return Point(board, parents, attr)
