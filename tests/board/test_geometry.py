"""
Tests for the geometry primitives: lines and segments, gliders, groups,
ticks and texts.
"""

import numpy as np
import pytest

from pygeoboard.board import Coords, Glider, Group, Ticks
from pygeoboard.core.exceptions import ElementError, ValidationError


class TestCoords:

    def test_homogeneous(self):
        np.testing.assert_array_equal(Coords([2, 3]).usr_coords, [1.0, 2.0, 3.0])

    def test_distance(self):
        assert Coords([0, 0]).distance(Coords([3, 4])) == 5.0
        assert Coords([0, 0]).distance([3, 4]) == 5.0


class TestLine:

    def test_stdform_contains_points(self, segment):
        c, a, b = segment.stdform
        for p in (segment.point1, segment.point2):
            assert c + a * p.x() + b * p.y() == pytest.approx(0.0)

    def test_segment_flags(self, board, segment):
        assert segment.is_segment
        line = board.create('line', [segment.point1, segment.point2])
        assert not line.is_segment

    def test_project_onto_segment(self, segment):
        xy, t = segment.project([1, 3])
        np.testing.assert_allclose(xy, [1.0, 0.0])
        assert t == pytest.approx(0.25)

    def test_segment_clamps(self, segment):
        xy, t = segment.project([10, 1])
        np.testing.assert_allclose(xy, [4.0, 0.0])
        assert t == 1.0

    def test_line_does_not_clamp(self, board):
        line = board.create('line', [[0, 0], [1, 1]])
        xy, t = line.project([3, 3])
        np.testing.assert_allclose(xy, [3.0, 3.0])
        assert t == pytest.approx(3.0)

    def test_degenerate_line_projects_to_point1(self, board):
        seg = board.create('segment', [[1, 1], [1, 1]])
        xy, t = seg.project([5, 5])
        np.testing.assert_allclose(xy, [1.0, 1.0])
        assert t == 0.0

    def test_coordinate_parents_create_points(self, board):
        seg = board.create('segment', [[0, 0], [1, 0]])
        assert len(board) == 3
        assert seg.point1.el_type == 'point'

    def test_parent_from_other_board_rejected(self, board):
        from pygeoboard import Board
        other = Board().create('point', [0, 0])
        p = board.create('point', [1, 1])
        with pytest.raises(ElementError, match="different board"):
            board.create('segment', [p, other])

    def test_stdform_follows_points(self, segment):
        segment.point2.move_to([0, 4])
        c, a, b = segment.stdform
        assert c + a * 0 + b * 2 == pytest.approx(0.0)


class TestGlider:

    def test_created_on_line(self, board, segment):
        g = board.create('glider', [3, 2, segment])
        assert isinstance(g, Glider)
        assert (g.x(), g.y()) == pytest.approx((3.0, 0.0))
        assert g.position == pytest.approx(0.75)

    def test_line_only_parent(self, board, segment):
        g = board.create('glider', [segment])
        assert g.position == 0.0

    def test_move_to_projects(self, board, segment):
        g = board.create('glider', [segment])
        g.move_to([1, -5])
        assert (g.x(), g.y()) == pytest.approx((1.0, 0.0))
        assert g.position == pytest.approx(0.25)

    def test_set_position_clamped_on_segment(self, board, segment):
        g = board.create('glider', [segment])
        g.set_position(1.5)
        assert g.position == 1.0
        assert g.x() == pytest.approx(4.0)

    def test_follows_line(self, board, segment):
        g = board.create('glider', [2, 0, segment])
        segment.point1.move_to([0, 2])
        assert (g.x(), g.y()) == pytest.approx((2.0, 1.0))

    def test_requires_line(self, board):
        p = board.create('point', [0, 0])
        with pytest.raises(ElementError, match="expected Line"):
            board.create('glider', [1, 1, p])

    def test_snapwidth_default(self, board, segment):
        g = board.create('glider', [segment])
        assert g.get_attribute('snapWidth') == -1


class TestGroup:

    def test_points_move_together(self, board):
        p1 = board.create('point', [0, 0])
        p2 = board.create('point', [2, 1])
        board.create('group', [p1, p2])
        p1.move_to([1, 1])
        assert (p2.x(), p2.y()) == pytest.approx((3.0, 2.0))

    def test_removed_with_last_point(self, board):
        p1 = board.create('point', [0, 0])
        p2 = board.create('point', [2, 1])
        group = board.create('group', [p1, p2])
        assert isinstance(group, Group)
        board.remove_object(p1)
        assert group in board
        board.remove_object(p2)
        assert group not in board

    def test_removing_group_releases_points(self, board):
        p1 = board.create('point', [0, 0])
        p2 = board.create('point', [2, 1])
        group = board.create('group', [p1, p2])
        board.remove_object(group)
        assert p1.groups == []
        p1.move_to([5, 5])
        assert (p2.x(), p2.y()) == (2.0, 1.0)

    def test_empty_group_rejected(self, board):
        with pytest.raises(ElementError):
            board.create('group', [])


class TestTicks:

    def test_tick_positions(self, board, segment):
        ticks = board.create('ticks', [segment, 1])
        assert isinstance(ticks, Ticks)
        xs = [c.usr_coords[1] for c in ticks.tick_coords()]
        assert xs == pytest.approx([0, 1, 2, 3, 4])

    def test_default_labels_are_distances(self, board, segment):
        ticks = board.create('ticks', [segment, 2])
        assert ticks.labels() == pytest.approx([0.0, 2.0, 4.0])

    def test_label_function(self, board, segment):
        ticks = board.create('ticks', [segment, 2, lambda c: c.usr_coords[1] * 10])
        assert ticks.labels() == pytest.approx([0.0, 20.0, 40.0])

    def test_attached_to_line(self, board, segment):
        ticks = board.create('ticks', [segment, 1])
        assert segment.ticks == [ticks]
        segment.remove_ticks(ticks)
        assert segment.ticks == []
        assert ticks not in board

    def test_removed_with_line(self, board, segment):
        ticks = board.create('ticks', [segment, 1])
        board.remove_object(segment)
        assert ticks not in board

    def test_negative_delta_rejected(self, board, segment):
        with pytest.raises(ValidationError):
            board.create('ticks', [segment, -1])


class TestText:

    def test_constant(self, board):
        t = board.create('text', [1, 2, 'hello'])
        assert (t.x(), t.y(), t.plaintext()) == (1.0, 2.0, 'hello')

    def test_callables_evaluated_on_access(self, board):
        p = board.create('point', [0, 0])
        t = board.create('text', [p.x, p.y, lambda: f"x={p.x():g}"])
        p.move_to([3, 4])
        assert (t.x(), t.y(), t.plaintext()) == (3.0, 4.0, 'x=3')

    def test_set_text(self, board):
        t = board.create('text', [0, 0, 'a'])
        t.set_text('b')
        assert t.plaintext() == 'b'
