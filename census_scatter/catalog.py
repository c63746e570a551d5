from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from census_scatter.errors import CatalogError, UnknownMetricError
from census_scatter.selection import AxisRole, SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricDescriptor:
    key: str
    label: str
    tooltip_prefix: str
    unit: str = ""


class MetricCatalog:
    """
    Static registry of the plottable metrics and which axis may show them.

    The X-eligible and Y-eligible sets are declared explicitly, must be
    disjoint and together cover every descriptor. Order inside each set is
    the on-screen label order, and its first key is the axis default.
    """

    def __init__(self, descriptors: Iterable[MetricDescriptor],
                 x_keys: Sequence[str], y_keys: Sequence[str]) -> None:
        self._descriptors = {d.key: d for d in descriptors}
        self._eligible = {AxisRole.X: tuple(x_keys), AxisRole.Y: tuple(y_keys)}

        xs, ys = set(self._eligible[AxisRole.X]), set(self._eligible[AxisRole.Y])
        if not xs or not ys:
            raise CatalogError("Both axes need at least one eligible metric.")
        if xs & ys:
            raise CatalogError(f"Metrics eligible for both axes: {sorted(xs & ys)}")
        if xs | ys != set(self._descriptors):
            missing = set(self._descriptors) ^ (xs | ys)
            raise CatalogError(f"Eligibility does not match descriptors: {sorted(missing)}")

    @classmethod
    def from_columns(cls, columns: Sequence[str],
                     labels: Optional[Mapping[str, str]] = None,
                     prefixes: Optional[Mapping[str, str]] = None,
                     units: Optional[Mapping[str, str]] = None) -> MetricCatalog:
        """Split an ordered metric list in half: first half → x-axis, second half → y-axis."""
        columns = list(columns)
        if len(columns) < 2 or len(columns) % 2:
            raise CatalogError(f"Need an even number of metrics (>= 2), got {len(columns)}.")
        labels, prefixes, units = labels or {}, prefixes or {}, units or {}

        descriptors = []
        for c in columns:
            label = labels.get(c, c.replace("_", " ").title())
            descriptors.append(MetricDescriptor(
                key=c,
                label=label,
                tooltip_prefix=prefixes.get(c, f"{label}: "),
                unit=units.get(c, ""),
            ))
        half = len(columns) // 2
        catalog = cls(descriptors, x_keys=columns[:half], y_keys=columns[half:])
        logger.debug("Catalog built: x=%s y=%s", columns[:half], columns[half:])
        return catalog

    def describe(self, key: str) -> MetricDescriptor:
        try:
            return self._descriptors[key]
        except KeyError:
            raise UnknownMetricError(key) from None

    def eligible(self, role: AxisRole) -> tuple[str, ...]:
        return self._eligible[role]

    def is_eligible(self, key: str, role: AxisRole) -> bool:
        return key in self._eligible[role]

    def default_selection(self) -> SelectionState:
        return SelectionState(active_x=self._eligible[AxisRole.X][0],
                              active_y=self._eligible[AxisRole.Y][0])

    @property
    def keys(self) -> tuple[str, ...]:
        return self._eligible[AxisRole.X] + self._eligible[AxisRole.Y]

    def __contains__(self, key: object) -> bool:
        return key in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
