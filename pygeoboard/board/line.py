"""
Lines and segments through two points.

A line keeps its homogeneous standard form ``[c, a, b]`` (the set of
``(x, y)`` with ``c + a*x + b*y == 0``), obtained as the cross product of
the homogeneous coordinates of its two points. Projection onto the line
uses the standard form, so it has to be current before gliders are
attached (see ``update_stdform``).
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygeoboard.core.constants import (
    EPS,
    OBJECT_TYPE_LINE,
    OBJECT_TYPE_POINT,
    OBJECT_TYPE_SEGMENT,
)
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.board.element import GeometryElement, ensure_element
from pygeoboard.board.point import Point

if TYPE_CHECKING:
    from pygeoboard.board.board import Board
    from pygeoboard.board.ticks import Ticks


class Line(GeometryElement):
    """Line (or segment, depending on straightfirst/straightlast) through two points."""

    def __init__(
        self,
        board: Board,
        point1: Point,
        point2: Point,
        attributes: dict[str, Any],
        el_type: str = OBJECT_TYPE_LINE,
    ):
        self.point1 = point1
        self.point2 = point2
        self.stdform: NDArray[np.floating[Any]] = np.zeros(3)
        self.ticks: list[Ticks] = []
        super().__init__(board, attributes, el_type)
        self.parents = [point1.id, point2.id]
        self.update_stdform()

    @property
    def is_segment(self) -> bool:
        return not (self.visprop.get('straightfirst', True)
                    or self.visprop.get('straightlast', True))

    def update_stdform(self) -> None:
        """Recompute ``[c, a, b]`` from the current point coordinates."""
        self.stdform = np.cross(
            self.point1.coords.usr_coords, self.point2.coords.usr_coords
        )

    def direction(self) -> NDArray[np.floating[Any]]:
        return self.point2.coords.xy - self.point1.coords.xy

    def length(self) -> float:
        """Distance between the two defining points."""
        return self.point1.dist(self.point2)

    def point_at(self, t: float) -> NDArray[np.floating[Any]]:
        """Coordinates of ``point1 + t * (point2 - point1)``."""
        return self.point1.coords.xy + t * self.direction()

    def project(self, pos: ArrayLike) -> tuple[NDArray[np.floating[Any]], float]:
        """
        Orthogonal projection of ``pos`` onto the line.

        Returns
        -------
        xy : ndarray
            Coordinates of the foot point.
        t : float
            Parameter of the foot point along point1 -> point2. Clamped to
            [0, 1] for segments. A degenerate line (coincident points)
            projects everything onto point1 with ``t == 0``.
        """
        xy = np.asarray(pos, dtype=np.float64)
        c, a, b = self.stdform
        n2 = a * a + b * b
        if np.sqrt(n2) < EPS:
            return self.point1.coords.xy, 0.0

        foot = xy - (c + a * xy[0] + b * xy[1]) / n2 * np.array([a, b])
        d = self.direction()
        t = float(np.dot(foot - self.point1.coords.xy, d) / np.dot(d, d))

        if self.is_segment:
            t = float(np.clip(t, 0.0, 1.0))
            foot = self.point_at(t)

        return foot, t

    def add_ticks(self, ticks: Ticks) -> None:
        self.ticks.append(ticks)

    def remove_ticks(self, ticks: Ticks) -> None:
        """Detach ``ticks`` from the line and remove it from the board."""
        if ticks in self.ticks:
            self.ticks.remove(ticks)
        self.board.remove_object(ticks)

    def update(self) -> Line:
        self.update_stdform()
        return self

    def remove(self) -> None:
        for ticks in list(self.ticks):
            self.remove_ticks(ticks)
        super().remove()


def _line_points(board: Board, parents: list[Any], el_type: str) -> tuple[Point, Point]:
    if len(parents) != 2:
        raise ElementError(
            f"{el_type}: expected two parents, got {len(parents)}",
            el_type=el_type,
        )
    points = []
    for parent in parents:
        if isinstance(parent, Point):
            points.append(ensure_element(parent, Point, board, el_type))
        else:
            points.append(board.create(OBJECT_TYPE_POINT, parent, {'withlabel': False}))
    return points[0], points[1]


def create_line(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Line:
    """
    Create an infinite line.

    Parents: two points, or coordinate pairs from which points are created.
    """
    p1, p2 = _line_points(board, parents, OBJECT_TYPE_LINE)
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_LINE)
    return Line(board, p1, p2, attr, el_type=OBJECT_TYPE_LINE)


def create_segment(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Line:
    """Create a segment: a line bounded by its two points."""
    p1, p2 = _line_points(board, parents, OBJECT_TYPE_SEGMENT)
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_SEGMENT)
    attr['straightfirst'] = False
    attr['straightlast'] = False
    return Line(board, p1, p2, attr, el_type=OBJECT_TYPE_SEGMENT)
