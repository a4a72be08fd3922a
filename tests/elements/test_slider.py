"""
Tests for the slider composite element.

Covers construction of the owned sub-elements, value mapping and
snapping, tick labels, the value label, moving and teardown.
"""

import pytest

from pygeoboard import Board, Slider
from pygeoboard.board import Line, Point, Text, Ticks
from pygeoboard.core.exceptions import ElementError


class TestConstruction:

    def test_returns_slider(self, slider):
        assert isinstance(slider, Slider)
        assert slider.el_type == 'slider'

    def test_owned_sub_elements(self, slider):
        assert isinstance(slider.point1, Point)
        assert isinstance(slider.point2, Point)
        assert isinstance(slider.baseline, Line)
        assert isinstance(slider.highline, Line)
        assert isinstance(slider.ticks, Ticks)
        assert isinstance(slider.label, Text)

    def test_baseline_between_endpoints(self, slider):
        assert slider.baseline.point1 is slider.point1
        assert slider.baseline.point2 is slider.point2
        assert slider.baseline.is_segment

    def test_highline_from_start_to_glider(self, slider):
        assert slider.highline.point1 is slider.point1
        assert slider.highline.point2 is slider

    def test_element_count(self, board, slider):
        # point1, point2, group, baseline, ticks, slider, highline, label
        assert len(board) == 8

    def test_without_ticks_and_label(self, board):
        s = board.create('slider', [[0, 0], [1, 0], [0, 0.5, 1]],
                         {'withTicks': False, 'withLabel': False})
        assert s.ticks is None
        assert s.label is None
        assert set(s.subs) == {'point1', 'point2', 'baseline', 'highline'}
        assert len(board) == 6

    def test_subs(self, slider):
        assert slider.subs == {
            'point1': slider.point1,
            'point2': slider.point2,
            'baseline': slider.baseline,
            'highline': slider.highline,
            'ticks': slider.ticks,
            'label': slider.label,
        }

    def test_range_attributes(self, slider):
        assert (slider.smin, slider.smax) == (0.0, 10.0)

    def test_start_position_interpolated(self, board):
        s = board.create('slider', [[1, 2], [3, 2], [1, 5, 10]])
        assert (s.x(), s.y()) == pytest.approx((1 + 2 * 4 / 9, 2.0))
        assert s.value() == pytest.approx(5.0)

    def test_endpoints_hidden_and_unnamed(self, slider):
        assert slider.point1.name == ''
        assert slider.point1.get_attribute('visible') is False
        assert slider.point2.get_attribute('fixed') is True

    def test_own_label_disabled(self, slider):
        assert slider.get_attribute('withlabel') is False

    def test_sub_element_attributes(self, board):
        s = board.create('slider', [[0, 0], [1, 0], [0, 0, 1]],
                         {'highline': {'strokeColor': 'red'}})
        assert s.highline.get_attribute('strokecolor') == 'red'
        assert s.highline.get_attribute('strokewidth') == 3

    def test_wrong_parents(self, board):
        with pytest.raises(ElementError):
            board.create('slider', [[0, 0], [1, 0]])

    def test_parents_kept(self, board):
        parents = [[0, 0], [1, 0], [0, 0.5, 1]]
        s = board.create('slider', parents)
        assert s.parents == parents


class TestValue:

    def test_value_alias(self, slider):
        assert slider.Value() == slider.value()

    def test_endpoints(self, slider):
        slider.set_position(0)
        assert slider.value() == 0.0
        slider.set_position(1)
        assert slider.value() == 10.0

    def test_linear_mapping(self, board):
        s = board.create('slider', [[0, 0], [2, 0], [-1, 0, 3]])
        s.move_to([0.5, 7])
        assert s.value() == pytest.approx(0.0)

    def test_snapping(self, board):
        s = board.create('slider', [[0, 0], [10, 0], [0, 0, 10]], {'snapWidth': 1})
        s.move_to([3.4, 0])
        assert s.value() == 3.0
        s.move_to([3.6, 0])
        assert s.value() == 4.0

    def test_snapping_rounds_half_up(self, board):
        s = board.create('slider', [[0, 0], [10, 0], [0, 0, 10]], {'snapWidth': 1})
        s.move_to([2.5, 0])
        assert s.value() == 3.0

    def test_fractional_snap_width(self, board):
        s = board.create('slider', [[0, 0], [1, 0], [0, 0, 1]], {'snapWidth': 0.25})
        s.move_to([0.3, 0])
        assert s.value() == pytest.approx(0.25)

    def test_snapping_disabled_by_sentinel(self, board):
        s = board.create('slider', [[0, 0], [10, 0], [0, 0, 10]], {'snapWidth': -1})
        s.move_to([3.4, 0])
        assert s.value() == pytest.approx(3.4)

    def test_board_default_snap_width(self):
        board = Board(options={'slider': {'snapWidth': 2}})
        s = board.create('slider', [[0, 0], [10, 0], [0, 5, 10]])
        assert s.value() == 6.0

    def test_move_clamped_to_range(self, slider):
        slider.move_to([100, 0])
        assert slider.value() == 10.0

    def test_set_value(self, slider):
        slider.set_value(7.5)
        assert slider.value() == pytest.approx(7.5)
        assert slider.x() == pytest.approx(3.0)

    def test_set_value_clamped(self, slider):
        slider.set_value(-3)
        assert slider.value() == 0.0

    def test_set_value_small_range(self, board):
        s = board.create('slider', [[0, 0], [1, 0], [0, 0, 1e-7]])
        s.set_value(5e-8)
        assert s.value() == pytest.approx(5e-8, rel=1e-9)
        assert s.position == pytest.approx(0.5)

    def test_set_value_coincident_endpoints(self, board):
        s = board.create('slider', [[1, 1], [1, 1], [0, 0, 10]])
        s.set_value(7)
        assert s.position == 0.0
        assert s.value() == 0.0
        assert (s.x(), s.y()) == pytest.approx((1.0, 1.0))
        assert s.label.plaintext() == '0.00'

    def test_degenerate_range_warns(self, board):
        with pytest.warns(RuntimeWarning, match="empty range"):
            s = board.create('slider', [[0, 0], [1, 0], [2, 2, 2]])
        assert s.value() == 2.0
        assert s.position == 0.0


class TestTicks:

    def test_tick_labels_interpolate_range(self, slider):
        assert slider.ticks.labels() == pytest.approx([0.0, 5.0, 10.0])

    def test_tick_labels_with_offset_range(self, board):
        s = board.create('slider', [[1, 1], [1, 5], [-2, 0, 2]])
        assert s.ticks.labels() == pytest.approx([-2.0, 0.0, 2.0])

    def test_coincident_endpoints(self, board):
        s = board.create('slider', [[1, 1], [1, 1], [0, 0, 10]])
        assert s.ticks.labels() == [0.0]

    def test_ticks_on_baseline(self, slider):
        assert slider.ticks.line is slider.baseline
        assert slider.baseline.ticks == [slider.ticks]


class TestLabel:

    def test_default_precision(self, slider):
        assert slider.label.plaintext() == '5.00'

    def test_name_prefix_and_precision(self, board):
        s = board.create('slider', [[0, 0], [3, 0], [0, 1, 3]],
                         {'name': 'a', 'precision': 3})
        assert s.label.plaintext() == 'a = 1.000'
        assert s.name == 'a'

    def test_board_default_name_not_in_label(self):
        board = Board(options={'elements': {'name': 'q'}})
        s = board.create('slider', [[0, 0], [4, 0], [0, 5, 10]])
        assert s.label.plaintext() == '5.00'

    def test_name_key_case_insensitive(self, board):
        s = board.create('slider', [[0, 0], [4, 0], [0, 5, 10]], {'Name': 'b'})
        assert s.label.plaintext() == 'b = 5.00'

    def test_follows_value(self, slider):
        slider.set_value(2.5)
        assert slider.label.plaintext() == '2.50'

    def test_position_right_of_end_point(self, slider):
        assert (slider.label.x(), slider.label.y()) == pytest.approx((4.2, 0.0))


class TestMoving:

    def test_moving_anchor_moves_slider(self, slider):
        slider.point1.move_to([0, 1])
        assert (slider.point2.x(), slider.point2.y()) == pytest.approx((4.0, 1.0))
        assert (slider.x(), slider.y()) == pytest.approx((2.0, 1.0))
        assert slider.value() == pytest.approx(5.0)

    def test_label_follows_anchor(self, slider):
        slider.point2.move_to([4, 2])
        assert slider.label.y() == pytest.approx(2.0)


class TestRemove:

    def test_removes_all_sub_elements(self, board, slider):
        board.remove_object(slider)
        assert len(board) == 0
        for el in [slider, *slider.subs.values()]:
            assert el.removed

    def test_direct_remove(self, board, slider):
        slider.remove()
        assert len(board) == 0

    def test_other_elements_kept(self, board, slider):
        p = board.create('point', [9, 9])
        board.remove_object(slider)
        assert list(board) == [p]

    def test_removal_order(self, board, slider):
        removed = []
        original = board.unregister

        def record(el):
            removed.append(el)
            original(el)

        board.unregister = record
        slider.remove()
        expected = [slider.label, slider.highline, slider.ticks, slider.baseline,
                    slider.point2, slider.point1, slider]
        assert [el for el in removed if el.el_type != 'group'] == expected


class TestDump:

    def test_only_slider_dumped(self, board, slider):
        entries = board.dump()
        assert [e['type'] for e in entries] == ['group', 'slider']
        assert entries[-1]['parents'] == [[0, 0], [4, 0], [0, 5, 10]]
