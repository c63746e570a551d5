from __future__ import annotations

import numpy as np

from census_scatter.render import PointMarker, RenderPipeline, place_markers, raw_value, tooltip_template
from census_scatter.scales import ScaleManager
from census_scatter.selection import AxisRole, SelectionState

DEFAULT = SelectionState("per_below_poverty", "per_no_coverage")


def _scales(dataset, selection, width=100, height=50) -> ScaleManager:
    sm = ScaleManager(width, height)
    sm.apply(*sm.recompute(dataset, selection.active_x, selection.active_y))
    return sm


def test_tooltip_template_uses_prefix_and_unit(catalog) -> None:
    tpl = tooltip_template(DEFAULT, catalog)
    assert tpl == (
        "%{customdata[0]}<br>"
        "Poverty: %{customdata[1]}%<br>"
        "Lacks Coverage: %{customdata[2]}%<extra></extra>"
    )
    income = tooltip_template(SelectionState("median_income", "per_obsess"), catalog)
    assert "Median Income: %{customdata[1]}<br>" in income
    assert "Obesity: %{customdata[2]}%" in income


def test_raw_value_keeps_csv_digits() -> None:
    assert raw_value(42830.0) == "42830"
    assert raw_value(19.3) == "19.3"
    assert raw_value(float("nan")) == ""


def test_tooltip_shows_unabbreviated_income(dataset, catalog) -> None:
    selection = SelectionState("median_income", "per_no_coverage")
    fig = RenderPipeline(catalog).render(dataset, _scales(dataset, selection), selection)
    rows = np.asarray(fig.data[0].customdata).tolist()
    assert rows[0] == ["Alabama", "42830", "13.9"]
    assert rows[2] == ["Vermont", "54447", "5"]


def test_place_markers_one_per_row(dataset) -> None:
    sm = _scales(dataset, DEFAULT)
    markers = place_markers(dataset, sm, DEFAULT)
    assert [m.label for m in markers] == ["AL", "TX", "VT"]
    assert markers[0] == PointMarker("1", "AL", sm.x(10.0), sm.y(13.9))
    # top of the range is the padded max, so the largest value sits inside the plot
    assert all(0 <= m.x <= 100 and 0 <= m.y <= 50 for m in markers)


def test_first_render_builds_one_trace_keyed_by_row(dataset, catalog) -> None:
    pipe = RenderPipeline(catalog, 960, 500)
    fig = pipe.render(dataset, _scales(dataset, DEFAULT), DEFAULT)

    assert len(fig.data) == 1
    trace = fig.data[0]
    assert list(trace.ids) == ["1", "2", "3"]
    assert list(trace.text) == ["AL", "TX", "VT"]
    assert trace.marker.size == 18
    assert trace.marker.color == "#a3c2c2"
    assert np.asarray(trace.customdata)[:, 0].tolist() == ["Alabama", "Texas", "Vermont"]
    assert (fig.layout.width, fig.layout.height) == (960, 500)
    assert list(fig.layout.xaxis.range) == [8.0, 1.1 * 30.0]


def test_rerender_moves_existing_trace(dataset, catalog) -> None:
    pipe = RenderPipeline(catalog)
    fig = pipe.render(dataset, _scales(dataset, DEFAULT), DEFAULT)
    trace = fig.data[0]

    switched = SelectionState("median_age", "per_obsess")
    again = pipe.render(dataset, _scales(dataset, switched), switched, figure=fig, duration=1800)

    assert again is fig
    assert again.data[0] is trace
    assert list(trace.y) == [35.6, 31.9, 24.8]
    assert "Median Age: " in trace.hovertemplate
    assert fig.layout.transition.duration == 1800
    assert fig.layout.transition.easing == "cubic-in-out"


def test_redraw_axis_only_touches_one_axis(dataset, catalog) -> None:
    pipe = RenderPipeline(catalog)
    sm = _scales(dataset, DEFAULT)
    fig = pipe.render(dataset, sm, DEFAULT)
    y_before = fig.layout.yaxis.range

    sm.apply((0.0, 50.0), (0.0, 1.0))
    pipe.redraw_axis(fig, sm, AxisRole.X)

    assert list(fig.layout.xaxis.range) == [0.0, 50.0]
    assert fig.layout.yaxis.range == y_before
    assert list(fig.layout.xaxis.tickvals) == [0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50]
