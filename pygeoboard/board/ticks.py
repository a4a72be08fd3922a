"""
Tick marks along a line.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING
import numpy as np

from pygeoboard.core.constants import EPS, OBJECT_TYPE_TICKS
from pygeoboard.core.exceptions import ElementError, ValidationError
from pygeoboard.core.options import copy_attributes
from pygeoboard.board.coords import Coords
from pygeoboard.board.element import GeometryElement, ensure_element
from pygeoboard.board.line import Line

if TYPE_CHECKING:
    from pygeoboard.board.board import Board

LabelFunction = Callable[[Coords], float]


class Ticks(GeometryElement):
    """
    Equidistant ticks on a line, from point1 towards point2.

    Attributes
    ----------
    line : Line
        Line carrying the ticks.
    ticks_delta : float
        Distance between consecutive ticks in user units.
    generate_label : callable or None
        Maps the coordinates of a tick to its label value. Without it the
        label is the distance of the tick from point1.
    """

    def __init__(
        self,
        board: Board,
        line: Line,
        ticks_delta: float,
        generate_label: LabelFunction | None,
        attributes: dict[str, Any],
    ):
        self.line = line
        self.ticks_delta = float(ticks_delta)
        self.generate_label = generate_label
        super().__init__(board, attributes, OBJECT_TYPE_TICKS)
        self.parents = [line.id, self.ticks_delta]
        line.add_ticks(self)

    def tick_coords(self) -> list[Coords]:
        """Coordinates of all ticks between point1 and point2 (inclusive)."""
        start = self.line.point1.coords.xy
        length = self.line.length()
        if length < EPS or self.ticks_delta < EPS:
            return [Coords(start)]

        unit = self.line.direction() / length
        n = int(np.floor(length / self.ticks_delta + EPS))
        return [Coords(start + i * self.ticks_delta * unit) for i in range(n + 1)]

    def labels(self) -> list[float]:
        """Label value of every tick."""
        if self.generate_label is None:
            p1 = self.line.point1.coords
            return [p1.distance(c) for c in self.tick_coords()]
        return [float(self.generate_label(c)) for c in self.tick_coords()]

    def remove(self) -> None:
        if self in self.line.ticks:
            self.line.ticks.remove(self)
        super().remove()


def create_ticks(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Ticks:
    """
    Create ticks.

    Parents: ``[line, ticks_delta]`` or ``[line, ticks_delta, label_function]``.
    """
    if len(parents) not in (2, 3):
        raise ElementError(
            f"ticks: expected parents [line, delta(, label_function)], got {len(parents)} parents",
            el_type=OBJECT_TYPE_TICKS,
        )
    line = ensure_element(parents[0], Line, board, OBJECT_TYPE_TICKS)
    delta = parents[1]
    if not isinstance(delta, (int, float, np.number)) or delta < 0:
        raise ValidationError(f"ticks_delta: expected a non-negative number, got {delta!r}")
    label_fn = parents[2] if len(parents) == 3 else None
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_TICKS)
    return Ticks(board, line, delta, label_fn, attr)
