"""
Slider: a control for choosing a number from a range.

A slider is a glider on a baseline segment between two grouped anchor
points. Its value is the glider's position along the baseline mapped
linearly onto ``[min, max]``, optionally snapped to multiples of
``snapwidth``. Tick marks, a highlighted progress segment and a value
label are created alongside and owned by the slider.

Example
-------
>>> board = Board()
>>> s = board.create('slider', [[1, 2], [3, 2], [1, 5, 10]], {'snapWidth': 1})
>>> s.value()
5.0
"""

from __future__ import annotations

import math
import warnings
from typing import Any

from numpy.typing import ArrayLike

from pygeoboard.core.constants import (
    EPS,
    SNAP_DISABLED,
    OBJECT_TYPE_POINT,
    OBJECT_TYPE_GROUP,
    OBJECT_TYPE_SEGMENT,
    OBJECT_TYPE_TICKS,
    OBJECT_TYPE_TEXT,
    OBJECT_TYPE_SLIDER,
)
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.board import Board, Coords, Glider, Line, Point, Text, Ticks


class Slider(Glider):
    """
    Glider on a baseline whose position encodes a number in ``[smin, smax]``.

    Attributes
    ----------
    smin, smax : float
        Range of the slider.
    point1, point2 : Point
        Start and end of the baseline.
    baseline : Line
        Segment the glider is bound to.
    highline : Line
        Segment from point1 to the glider, indicating the progress.
    ticks : Ticks or None
        Tick marks on the baseline (``withticks``).
    label : Text or None
        Text showing the current value (``withlabel``).
    """

    def __init__(
        self,
        board: Board,
        coords: ArrayLike,
        baseline: Line,
        attributes: dict[str, Any],
        smin: float,
        smax: float,
    ):
        self.smin = smin
        self.smax = smax
        self.point1: Point | None = None
        self.point2: Point | None = None
        self.baseline: Line | None = None
        self.highline: Line | None = None
        self.ticks: Ticks | None = None
        self.label: Text | None = None
        super().__init__(board, coords, baseline, attributes, el_type=OBJECT_TYPE_SLIDER)

    def value(self) -> float:
        """Current value, snapped to multiples of ``snapwidth`` unless snapping is off."""
        raw = self.position * (self.smax - self.smin) + self.smin
        snap = self.visprop.get('snapwidth', SNAP_DISABLED)
        if snap == SNAP_DISABLED or snap <= 0:
            return raw
        # half-up rounding, round() would round half to even
        return float(math.floor(raw / snap + 0.5) * snap)

    Value = value

    def set_value(self, value: float) -> Slider:
        """
        Move the glider to ``value`` (clamped to the slider range).

        On an empty range, or when the baseline has collapsed to a point,
        the glider stays at point1 and the value is ``smin``.
        """
        sdiff = self.smax - self.smin
        if sdiff == 0 or self.slide_object.length() < EPS:
            return self.set_position(0.0)
        return self.set_position((value - self.smin) / sdiff)

    def remove(self) -> None:
        """Remove the slider together with all sub-elements."""
        if self.removed:
            return
        board = self.board
        if self.label is not None:
            board.remove_object(self.label)
        board.remove_object(self.highline)
        if self.ticks is not None:
            self.baseline.remove_ticks(self.ticks)
        board.remove_object(self.baseline)
        board.remove_object(self.point2)
        board.remove_object(self.point1)
        super().remove()


def create_slider(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Slider:
    """
    Create a slider.

    Parameters
    ----------
    board : Board
    parents : list
        ``[start_pos, end_pos, [min, start, max]]``: the two endpoints of the
        baseline and the range with the initial value.
    attributes : dict
        Slider attributes. Recognised: ``withticks``, ``withlabel``,
        ``snapwidth`` (-1 disables snapping), ``precision`` (decimals of the
        label), ``name`` (label prefix), and sub-element sections
        ``point1``, ``point2``, ``baseline``, ``highline``, ``ticks``, ``label``.

    Returns
    -------
    Slider
    """
    if len(parents) != 3 or len(parents[2]) != 3:
        raise ElementError(
            "slider: expected parents [start_pos, end_pos, [min, start, max]]",
            el_type=OBJECT_TYPE_SLIDER,
        )

    pos0 = [float(v) for v in parents[0]]
    pos1 = [float(v) for v in parents[1]]
    smin, start, smax = (float(v) for v in parents[2])
    sdiff = smax - smin

    attr = copy_attributes(attributes, board.options, 'slider')
    with_ticks = attr['withticks']
    with_text = attr['withlabel']
    snap_width = attr['snapwidth']
    precision = int(attr['precision'])
    # only the slider's own name prefixes the label, not board-wide defaults
    name = {str(k).lower(): v for k, v in attributes.items()}.get('name') or ''

    # start point
    attr = copy_attributes(attributes, board.options, 'slider', 'point1')
    p1 = board.create(OBJECT_TYPE_POINT, pos0, attr)

    # end point
    attr = copy_attributes(attributes, board.options, 'slider', 'point2')
    p2 = board.create(OBJECT_TYPE_POINT, pos1, attr)
    board.create(OBJECT_TYPE_GROUP, [p1, p2])

    # slide line
    attr = copy_attributes(attributes, board.options, 'slider', 'baseline')
    l1 = board.create(OBJECT_TYPE_SEGMENT, [p1, p2], attr)

    # the glider below is projected with the standard form
    l1.update_stdform()

    ti = None
    if with_ticks:
        attr = copy_attributes(attributes, board.options, 'slider', 'ticks')
        n_ticks = 2

        def tick_value(tick: Coords) -> float:
            d_full = p1.dist(p2)
            d = p1.coords.distance(tick)
            if d_full < EPS:
                return 0.0
            return d / d_full * sdiff + smin

        ti = board.create(OBJECT_TYPE_TICKS, [l1, p2.dist(p1) / n_ticks, tick_value], attr)

    if sdiff == 0:
        warnings.warn(
            f"slider: empty range [{smin}, {smax}], placing the glider at the start",
            RuntimeWarning,
            stacklevel=3,
        )
        frac = 0.0
    else:
        frac = (start - smin) / sdiff
    start_x = pos0[0] + (pos1[0] - pos0[0]) * frac
    start_y = pos0[1] + (pos1[1] - pos0[1]) * frac

    # glider point; its own label is replaced by the text element below
    attr = copy_attributes(attributes, board.options, 'slider')
    attr['withlabel'] = False
    p3 = Slider(board, [start_x, start_y], l1, attr, smin=smin, smax=smax)
    p3.set_attribute(snapwidth=snap_width)

    # segment from start point to glider point
    attr = copy_attributes(attributes, board.options, 'slider', 'highline')
    l2 = board.create(OBJECT_TYPE_SEGMENT, [p1, p3], attr)

    t = None
    if with_text:
        prefix = f"{name} = " if name else ''
        attr = copy_attributes(attributes, board.options, 'slider', 'label')
        t = board.create(OBJECT_TYPE_TEXT, [
            lambda: (p2.x() - p1.x()) * 0.05 + p2.x(),
            lambda: (p2.y() - p1.y()) * 0.05 + p2.y(),
            lambda: f"{prefix}{p3.value():.{precision}f}",
        ], attr)

    p3.point1 = p1
    p3.point2 = p2
    p3.baseline = l1
    p3.highline = l2
    p3.ticks = ti
    p3.label = t

    p1.dump = False
    p2.dump = False
    l1.dump = False
    l2.dump = False

    p3.parents = parents
    p3.subs = {
        'point1': p1,
        'point2': p2,
        'baseline': l1,
        'highline': l2,
    }
    if ti is not None:
        ti.dump = False
        p3.subs['ticks'] = ti
    if t is not None:
        t.dump = False
        p3.subs['label'] = t

    return p3
