from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from dash import ALL, Dash, Input, Output, State, ctx, dcc, html
from dash.exceptions import PreventUpdate

from census_scatter import config, theme
from census_scatter.catalog import MetricCatalog
from census_scatter.controller import ChartController
from census_scatter.data import Dataset, load_dataset
from census_scatter.selection import AxisRole, SelectionState

logger = logging.getLogger(__name__)

LABEL_TYPE = "axis-label"

# Pushes the browser size into the "viewport" store on load and on every resize.
RESIZE_LISTENER = """
function(pathname) {
    if (!window.__censusScatterResize) {
        window.__censusScatterResize = true;
        let timer = null;
        window.addEventListener("resize", function() {
            clearTimeout(timer);
            timer = setTimeout(function() {
                dash_clientside.set_props("viewport", {
                    data: {width: window.innerWidth, height: window.innerHeight}
                });
            }, 150);
        });
    }
    return {width: window.innerWidth, height: window.innerHeight};
}
"""


# -----------------------------
# HELPERS
# -----------------------------
def build_catalog(dataset: Dataset) -> MetricCatalog:
    return MetricCatalog.from_columns(
        dataset.metric_columns,
        labels=config.METRIC_LABELS,
        prefixes=config.TOOLTIP_PREFIXES,
        units=config.METRIC_UNITS,
    )


def svg_size(viewport: Optional[dict]) -> tuple[int, int]:
    """Figure size for a browser viewport; the label gutters sit outside the figure."""
    if not viewport:
        return config.SVG_MAX_WIDTH, config.SVG_MAX_HEIGHT
    width = int(viewport.get("width") or config.SVG_MAX_WIDTH) - config.LABEL_GUTTER
    height = int(viewport.get("height") or config.SVG_MAX_HEIGHT) - config.LABEL_GUTTER
    return max(width, config.MIN_SVG_WIDTH), max(height, config.MIN_SVG_HEIGHT)


def label_id(role: AxisRole, key: str) -> dict:
    return {"type": LABEL_TYPE, "role": role.value, "key": key}


def class_names(classes: dict, outputs: list) -> list[str]:
    """className for each pattern-matched label output, in Dash's output order."""
    return [
        f"{LABEL_TYPE} {classes[(AxisRole(o['id']['role']), o['id']['key'])]}"
        for o in outputs
    ]


def axis_labels(catalog: MetricCatalog, selection: SelectionState, role: AxisRole) -> list:
    out = []
    for key in catalog.eligible(role):
        state = "active" if selection.active(role) == key else "inactive"
        out.append(html.Div(
            catalog.describe(key).label,
            id=label_id(role, key),
            className=f"{LABEL_TYPE} {state}",
            n_clicks=0,
        ))
    return out


# -----------------------------
# LAYOUT
# -----------------------------
def build_layout(controller: ChartController) -> html.Div:
    catalog, selection = controller.catalog, controller.selection
    return html.Div(style=theme.PAGE_STYLE, children=[
        dcc.Location(id="url"),
        dcc.Store(id="viewport", data=None),
        dcc.Store(id="selection", data=selection.to_dict(), storage_type="memory"),

        html.Div(style=theme.CHART_GRID_STYLE, children=[
            html.Div(className="y-labels", children=axis_labels(catalog, selection, AxisRole.Y)),
            dcc.Graph(id="scatter", figure=controller.figure, animate=True,
                      config={"displayModeBar": False}),
            html.Div(),
            html.Div(className="x-labels", children=axis_labels(catalog, selection, AxisRole.X)),
        ]),
    ])


# -----------------------------
# APP
# -----------------------------
def create_app(data_path: Union[str, Path] = config.DATASET_PATH,
               dataset: Optional[Dataset] = None) -> Dash:
    """Build the Dash app. A missing or malformed dataset aborts here (DatasetLoadError)."""
    dataset = dataset if dataset is not None else load_dataset(data_path)
    catalog = build_catalog(dataset)
    initial = ChartController(dataset, catalog)

    app = Dash(__name__, external_stylesheets=theme.EXTERNAL_CSS, title="Census Scatter")
    app.index_string = theme.INDEX_STRING
    app.layout = build_layout(initial)
    _register_callbacks(app, dataset, catalog)
    logger.info("Chart ready: %d rows, x=%s, y=%s", len(dataset),
                list(catalog.eligible(AxisRole.X)), list(catalog.eligible(AxisRole.Y)))
    return app


def _register_callbacks(app: Dash, dataset: Dataset, catalog: MetricCatalog) -> None:
    app.clientside_callback(
        RESIZE_LISTENER,
        Output("viewport", "data"),
        Input("url", "pathname"),
    )

    @app.callback(
        Output("scatter", "figure"),
        Output("selection", "data"),
        Output({"type": LABEL_TYPE, "role": ALL, "key": ALL}, "className"),
        Input("viewport", "data"),
        Input({"type": LABEL_TYPE, "role": ALL, "key": ALL}, "n_clicks"),
        State("selection", "data"),
        prevent_initial_call=True,
    )
    def update_chart(viewport, _clicks, stored):
        trigger = ctx.triggered_id
        if not trigger:
            raise PreventUpdate
        width, height = svg_size(viewport)
        state = SelectionState.from_dict(stored) if stored else catalog.default_selection()
        controller = ChartController(dataset, catalog, width, height, selection=state)

        if trigger == "viewport":
            controller.resize(width, height)
        else:
            if not ctx.triggered[0]["value"]:
                raise PreventUpdate
            if not controller.handle_click(trigger["key"], trigger["role"]):
                raise PreventUpdate

        return (
            controller.figure,
            controller.selection.to_dict(),
            class_names(controller.classes, ctx.outputs_list[2]),
        )
