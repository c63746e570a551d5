from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import plotly.graph_objects as go

from census_scatter import config
from census_scatter.catalog import MetricCatalog
from census_scatter.data import Dataset
from census_scatter.render import PointMarker, RenderPipeline, place_markers
from census_scatter.scales import ScaleManager
from census_scatter.selection import AxisRole, SelectionState

logger = logging.getLogger(__name__)

ACTIVE = "active"
INACTIVE = "inactive"


# -----------------------------
# EVENTS & COMMANDS
# -----------------------------
@dataclass(frozen=True)
class LabelClick:
    key: str
    role: AxisRole


@dataclass(frozen=True)
class Rescale:
    pass


@dataclass(frozen=True)
class Reposition:
    duration: int


@dataclass(frozen=True)
class RedrawAxis:
    role: AxisRole
    duration: int


@dataclass(frozen=True)
class SetLabelClasses:
    classes: Dict[Tuple[AxisRole, str], str]


RenderCommand = Union[Rescale, Reposition, RedrawAxis, SetLabelClasses]


def label_classes(state: SelectionState, catalog: MetricCatalog) -> Dict[Tuple[AxisRole, str], str]:
    """Active/inactive class for every label. Exactly one active label per axis."""
    return {
        (role, key): ACTIVE if state.active(role) == key else INACTIVE
        for role in AxisRole
        for key in catalog.eligible(role)
    }


def transition(state: SelectionState, event: LabelClick, catalog: MetricCatalog,
               duration: int = config.TRANSITION_MS) -> Tuple[SelectionState, Tuple[RenderCommand, ...]]:
    """
    Next selection and the render work it requires, for one label click.

    Clicking the label that is already active changes nothing. A key that is
    not eligible for the clicked axis is ignored the same way (and logged).
    """
    if state.active(event.role) == event.key:
        return state, ()
    if not catalog.is_eligible(event.key, event.role):
        logger.warning("Ignoring click on %r: not an %s-axis metric", event.key, event.role.value)
        return state, ()

    new_state = state.with_metric(event.role, event.key)
    commands = (
        Rescale(),
        Reposition(duration),
        RedrawAxis(event.role, duration),
        SetLabelClasses(label_classes(new_state, catalog)),
    )
    return new_state, commands


# -----------------------------
# CONTROLLER
# -----------------------------
class ChartController:
    """
    One chart instance: selection, scales and figure for a dataset.

    All mutation goes through handle_click() and resize(); the render layer
    never feeds state back.
    """

    def __init__(self, dataset: Dataset, catalog: MetricCatalog,
                 svg_width: int = config.SVG_MAX_WIDTH, svg_height: int = config.SVG_MAX_HEIGHT,
                 duration: int = config.TRANSITION_MS,
                 selection: Optional[SelectionState] = None) -> None:
        self.dataset = dataset
        self.catalog = catalog
        self.duration = duration
        self._build(svg_width, svg_height, selection or catalog.default_selection())

    def _build(self, svg_width: int, svg_height: int, selection: SelectionState) -> None:
        width, height = config.drawable_size(svg_width, svg_height)
        self.selection = selection
        self.scales = ScaleManager(width, height)
        self.pipeline = RenderPipeline(self.catalog, svg_width, svg_height)
        self.scales.apply(*self.scales.recompute(self.dataset, selection.active_x, selection.active_y))
        self.figure: go.Figure = self.pipeline.render(self.dataset, self.scales, selection)
        self.classes = label_classes(selection, self.catalog)

    def handle_click(self, key: str, role: Union[AxisRole, str]) -> Tuple[RenderCommand, ...]:
        new_state, commands = transition(self.selection, LabelClick(key, AxisRole(role)),
                                         self.catalog, self.duration)
        if not commands:
            return commands

        logger.debug("Selection %s -> %s", self.selection, new_state)
        self.selection = new_state
        for cmd in commands:
            self.execute(cmd)
        return commands

    def execute(self, cmd: RenderCommand) -> None:
        if isinstance(cmd, Rescale):
            self.scales.apply(*self.scales.recompute(
                self.dataset, self.selection.active_x, self.selection.active_y))
        elif isinstance(cmd, Reposition):
            self.pipeline.reposition(self.figure, self.dataset, self.selection, cmd.duration)
        elif isinstance(cmd, RedrawAxis):
            self.pipeline.redraw_axis(self.figure, self.scales, cmd.role)
        elif isinstance(cmd, SetLabelClasses):
            self.classes = dict(cmd.classes)

    def resize(self, svg_width: int, svg_height: int) -> None:
        """Tear the chart down and rebuild it at the new size from the default selection."""
        logger.info("Resize to %dx%d, resetting selection", svg_width, svg_height)
        self._build(svg_width, svg_height, self.catalog.default_selection())

    def markers(self) -> list[PointMarker]:
        return place_markers(self.dataset, self.scales, self.selection)
