"""
Gliders: points bound to a line.

A glider is parameterised by ``position``, the scalar ``t`` with
``coords == point1 + t * (point2 - point1)`` of the line it slides on.
When the line moves, the glider keeps its position and follows.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from pygeoboard.core.constants import OBJECT_TYPE_GLIDER
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.core.validation import check_coordinates
from pygeoboard.board.element import ensure_element
from pygeoboard.board.line import Line
from pygeoboard.board.point import Point

if TYPE_CHECKING:
    from pygeoboard.board.board import Board


class Glider(Point):
    """Point constrained to a line or segment."""

    def __init__(
        self,
        board: Board,
        coords: ArrayLike,
        slide_object: Line,
        attributes: dict[str, Any],
        el_type: str = OBJECT_TYPE_GLIDER,
    ):
        self.slide_object = slide_object
        self.position = 0.0
        super().__init__(board, coords, attributes, el_type)
        self.parents = self.coords.xy.tolist() + [slide_object.id]
        self._project(self.coords.xy)

    def _project(self, pos: ArrayLike) -> None:
        xy, t = self.slide_object.project(pos)
        self.coords.set(xy)
        self.position = t

    def move_to(self, pos: ArrayLike) -> Glider:
        """Move to the projection of ``pos`` onto the line and update the board."""
        self._project(check_coordinates(pos, "pos"))
        self.board.update()
        return self

    def set_position(self, t: float) -> Glider:
        """Place the glider at parameter ``t`` (clamped to [0, 1] on segments)."""
        t = float(t)
        if self.slide_object.is_segment:
            t = float(np.clip(t, 0.0, 1.0))
        self.position = t
        self.coords.set(self.slide_object.point_at(t))
        self.board.update()
        return self

    def update(self) -> Glider:
        self.coords.set(self.slide_object.point_at(self.position))
        return self


def create_glider(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Glider:
    """
    Create a glider.

    Parents: ``[x, y, line]`` (start at the projection of (x, y)) or
    ``[line]`` (start at the line's first point).
    """
    if len(parents) == 1:
        line = ensure_element(parents[0], Line, board, OBJECT_TYPE_GLIDER)
        start = line.point1.coords.xy
    elif len(parents) == 3:
        line = ensure_element(parents[2], Line, board, OBJECT_TYPE_GLIDER)
        start = parents[:2]
    else:
        raise ElementError(
            f"glider: expected parents [x, y, line] or [line], got {len(parents)} parents",
            el_type=OBJECT_TYPE_GLIDER,
        )
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_GLIDER)
    return Glider(board, start, line, attr)
