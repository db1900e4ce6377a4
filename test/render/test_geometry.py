"""Tests for chart geometry helpers"""

import pytest

from lilygraph.graph_params import ChartOptions
from lilygraph.render.geometry import ChartGeometry, format_number, round_half_up
from lilygraph.render.scale import Scale


@pytest.mark.parametrize(
    "value,expected", [(0, 0), (0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (7, 7)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(3.0) == "3"
    assert format_number(2.5) == "2.5"


def test_pitches_follow_plot_area():
    """800x600 with default margins leaves a 700x450 plot area"""
    geometry = ChartGeometry(ChartOptions(), Scale(max=4, division=1), slot_count=3)
    assert geometry.graph_width == 700
    assert geometry.graph_height == 450
    assert geometry.dx == pytest.approx(700 / 3)
    assert geometry.dy == pytest.approx(112.5)
    assert geometry.baseline == 500


def test_bars_in_a_slot():
    options = ChartOptions(padding=20)
    geometry = ChartGeometry(options, Scale(max=40, division=10), slot_count=2)
    # dx = 350, available = 330, bar width = 110, dy = 112.5
    bars = geometry.bars(1, [10, 20, 0])

    assert [bar.item_index for bar in bars] == [0, 1, 2]
    assert [bar.width for bar in bars] == [110, 110, 110]
    assert [bar.x for bar in bars] == [410, 520, 630]
    assert [bar.height for bar in bars] == [113, 225, 0]
    assert [bar.y for bar in bars] == [387, 275, 500]
    assert bars[0].center_x == 465


def test_label_position_is_centered_under_slot():
    geometry = ChartGeometry(ChartOptions(), Scale(max=4, division=1), slot_count=2)
    assert geometry.label_position(0) == (225, 515)
    assert geometry.label_position(1) == (575, 515)
