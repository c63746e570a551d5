"""
Census Scatter
==============
Interactive scatter chart of US state demographics. Two of six metrics are
plotted at a time, one per axis; clicking an axis label swaps the metric
and animates every point to its new position.
"""
from census_scatter.catalog import MetricCatalog, MetricDescriptor
from census_scatter.controller import ChartController, LabelClick, transition
from census_scatter.data import Dataset, load_dataset
from census_scatter.selection import AxisRole, SelectionState

__all__ = [
    "AxisRole",
    "ChartController",
    "Dataset",
    "LabelClick",
    "MetricCatalog",
    "MetricDescriptor",
    "SelectionState",
    "load_dataset",
    "transition",
]

__version__ = "0.1.0"
