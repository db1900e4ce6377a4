"""Tests for chart option and data models"""

import pytest
from pydantic import ValidationError

from lilygraph.graph_params import ChartData, ChartOptions, Margin, ViewBox


def test_option_defaults():
    options = ChartOptions()
    assert options.viewbox == ViewBox(width=800, height=600)
    assert options.margin == Margin(top=50, left=50, right=50, bottom=100)
    assert options.padding == 14
    assert (options.width, options.height, options.indent) == ("100%", "100%", 2)
    assert (options.chart_type, options.bar_text, options.legend_side) == ("bar", "number", "right")
    assert options.flush is False
    assert options.title is None and options.subtitle is None


def test_graph_area():
    options = ChartOptions(viewbox={"width": 400, "height": 300})
    assert options.graph_width == 300
    assert options.graph_height == 150


def test_merged_keeps_unspecified_keys():
    options = ChartOptions(title="Sales", padding=4)
    merged = options.merged(chart_type="line")
    assert merged.title == "Sales"
    assert merged.padding == 4
    assert merged.chart_type == "line"
    assert options.chart_type == "bar"


def test_merged_merges_nested_mappings():
    merged = ChartOptions().merged(margin={"top": 80})
    assert merged.margin == Margin(top=80, left=50, right=50, bottom=100)


def test_merged_accepts_models():
    merged = ChartOptions().merged(viewbox=ViewBox(width=100, height=50))
    assert merged.viewbox.width == 100


def test_extra_options_are_kept():
    """Undeclared keys survive merging so callbacks can read them"""
    options = ChartOptions(target=2).merged(chart_type="line")
    assert options.target == 2
    assert options.model_extra == {"target": 2}
    assert options.merged(target=5).target == 5


def test_wrong_option_type_is_rejected():
    with pytest.raises(ValidationError):
        ChartOptions(viewbox={"width": "wide"})


def test_options_are_immutable():
    with pytest.raises(ValidationError):
        ChartOptions().title = "changed"


def test_bare_numbers_become_single_item_slots():
    data = ChartData(slots=[1, [2, 3], 4.5])
    assert data.slots == [[1], [2, 3], [4.5]]
    assert data.slot_count == 3


def test_integers_stay_integers():
    data = ChartData(slots=[[1, 2.5]])
    assert isinstance(data.slots[0][0], int)
    assert isinstance(data.slots[0][1], float)


def test_empty_data():
    data = ChartData()
    assert data.slots == []
    assert data.labels == []
    assert data.legend_entries() == []


def test_labels_are_stringified():
    assert ChartData(labels=[2023, "Q1"]).labels == ["2023", "Q1"]


def test_legend_entries_are_sorted_by_color():
    data = ChartData(legend={"#ff0000": "Red", "#00ff00": "Green", "#0000ff": "Blue"})
    assert data.legend_entries() == [("#0000ff", "Blue"), ("#00ff00", "Green"), ("#ff0000", "Red")]


def test_non_numeric_slot_is_rejected():
    with pytest.raises(ValidationError):
        ChartData(slots=[["a"]])


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_are_rejected(value):
    with pytest.raises(ValidationError):
        ChartData(slots=[1, value])
    with pytest.raises(ValidationError):
        ChartData(slots=[[2, value]])
