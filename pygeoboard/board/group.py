"""
Groups of points that move together.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
from numpy.typing import ArrayLike

from pygeoboard.core.constants import OBJECT_TYPE_GROUP
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.board.element import GeometryElement, ensure_element
from pygeoboard.board.point import Point

if TYPE_CHECKING:
    from pygeoboard.board.board import Board


class Group(GeometryElement):
    """
    Set of points that are translated together.

    Moving one member with ``Point.move_to`` moves every other member by
    the same offset. The group leaves the board when its last point is
    removed.
    """

    def __init__(self, board: Board, points: list[Point], attributes: dict[str, Any]):
        self.objects: dict[str, Point] = {}
        super().__init__(board, attributes, OBJECT_TYPE_GROUP)
        for point in points:
            self.add_point(point)
        self.parents = list(self.objects)

    def add_point(self, point: Point) -> None:
        if point.id in self.objects:
            return
        self.objects[point.id] = point
        point.groups.append(self)

    def remove_point(self, point: Point) -> None:
        if self.objects.pop(point.id, None) is None:
            return
        point.groups.remove(self)
        if not self.objects:
            self.board.remove_object(self)

    def translate(self, delta: ArrayLike, source: Point | None = None) -> None:
        """Shift every member except ``source`` by ``delta``."""
        for point in self.objects.values():
            if point is not source:
                point.coords.translate(delta)

    def remove(self) -> None:
        for point in list(self.objects.values()):
            point.groups.remove(self)
        self.objects.clear()
        super().remove()


def create_group(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Group:
    """Create a group. Parents: the points to group."""
    if not parents:
        raise ElementError("group: expected at least one point", el_type=OBJECT_TYPE_GROUP)
    points = [ensure_element(p, Point, board, OBJECT_TYPE_GROUP) for p in parents]
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_GROUP)
    return Group(board, points, attr)
