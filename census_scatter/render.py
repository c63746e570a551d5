from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from census_scatter import config, theme
from census_scatter.catalog import MetricCatalog
from census_scatter.data import Dataset
from census_scatter.scales import ScaleManager
from census_scatter.selection import AxisRole, SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointMarker:
    row_id: str
    label: str
    x: float
    y: float


def place_markers(dataset: Dataset, scales: ScaleManager, selection: SelectionState) -> list[PointMarker]:
    """Pixel position of every row under the current scales."""
    xs = scales.x(dataset.column(selection.active_x))
    ys = scales.y(dataset.column(selection.active_y))
    return [
        PointMarker(row_id=rid, label=lab, x=float(x), y=float(y))
        for rid, lab, x, y in zip(dataset.row_ids, dataset.short_labels, xs, ys)
    ]


def raw_value(value: float) -> str:
    """Number as written in the CSV (42830, 19.3); empty for NaN."""
    if np.isnan(value):
        return ""
    return str(int(value)) if float(value).is_integer() else str(float(value))


def tooltip_template(selection: SelectionState, catalog: MetricCatalog) -> str:
    # customdata columns: name, raw x, raw y
    dx = catalog.describe(selection.active_x)
    dy = catalog.describe(selection.active_y)
    return (
        "%{customdata[0]}<br>"
        f"{dx.tooltip_prefix}%{{customdata[1]}}{dx.unit}<br>"
        f"{dy.tooltip_prefix}%{{customdata[2]}}{dy.unit}<extra></extra>"
    )


class RenderPipeline:
    """
    Turns dataset + scales + selection into a Plotly figure.

    The first render builds a single marker trace with one point per row,
    keyed by row id. Later renders move the points of that same trace, so
    Plotly animates each state from its old position to its new one.
    """

    def __init__(self, catalog: MetricCatalog, svg_width: int = config.SVG_MAX_WIDTH,
                 svg_height: int = config.SVG_MAX_HEIGHT, tick_count: int = config.AXIS_TICKS) -> None:
        self.catalog = catalog
        self.svg_width = svg_width
        self.svg_height = svg_height
        self.tick_count = tick_count

    def render(self, dataset: Dataset, scales: ScaleManager, selection: SelectionState,
               figure: Optional[go.Figure] = None, duration: int = 0) -> go.Figure:
        if figure is None or not figure.data:
            figure = self._create(dataset)
        self.reposition(figure, dataset, selection, duration)
        for role in AxisRole:
            self.redraw_axis(figure, scales, role)
        return figure

    def reposition(self, figure: go.Figure, dataset: Dataset, selection: SelectionState,
                   duration: int = 0) -> None:
        trace = figure.data[0]
        xs = dataset.column(selection.active_x)
        ys = dataset.column(selection.active_y)
        trace.x = xs
        trace.y = ys
        trace.customdata = np.array(
            [[name, raw_value(x), raw_value(y)] for name, x, y in zip(dataset.names, xs, ys)],
            dtype=object,
        )
        trace.hovertemplate = tooltip_template(selection, self.catalog)
        figure.update_layout(transition={"duration": duration, "easing": config.TRANSITION_EASING})
        logger.debug("Repositioned %d markers (%s vs %s, %d ms)", len(dataset),
                     selection.active_x, selection.active_y, duration)

    def redraw_axis(self, figure: go.Figure, scales: ScaleManager, role: AxisRole) -> None:
        scale = scales.scale(role)
        update = figure.update_xaxes if role is AxisRole.X else figure.update_yaxes
        update(range=list(scale.domain), tickvals=scale.ticks(self.tick_count), autorange=False)

    def _create(self, dataset: Dataset) -> go.Figure:
        fig = go.Figure(go.Scatter(
            ids=dataset.row_ids,
            x=[], y=[],
            mode="markers+text",
            text=dataset.short_labels,
            textposition="middle center",
            textfont=dict(size=9, color=theme.MARKER_TEXT, family=theme.FONT_FAMILY),
            marker=dict(size=config.MARKER_RADIUS * 2, color=config.MARKER_FILL, line=dict(width=0)),
            showlegend=False,
        ))
        m = config.MARGIN
        fig.update_layout(
            width=self.svg_width, height=self.svg_height,
            margin=dict(l=m["left"], r=m["right"], t=m["top"], b=m["bottom"]),
            paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
            hovermode="closest", dragmode=False,
            font=dict(family=theme.FONT_FAMILY, color=theme.TEXT),
            hoverlabel=dict(bgcolor=theme.PANEL, bordercolor=theme.ACCENT, font=dict(color=theme.TEXT_BRIGHT)),
        )
        fig.update_xaxes(showline=True, linecolor=theme.TEXT_DIM, gridcolor=theme.GRID_LINE, zeroline=False)
        fig.update_yaxes(showline=True, linecolor=theme.TEXT_DIM, gridcolor=theme.GRID_LINE, zeroline=False)
        return fig
