from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from census_scatter.errors import EmptyDatasetError
from census_scatter.selection import AxisRole

logger = logging.getLogger(__name__)

Domain = Tuple[float, float]

# Axis padding around the data: 20% below the minimum, 10% above the maximum
PAD_LOW = 0.8
PAD_HIGH = 1.1

_E10, _E5, _E2 = math.sqrt(50), math.sqrt(10), math.sqrt(2)


def padded_domain(values: Sequence[float]) -> Domain:
    arr = np.asarray(values, dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        raise EmptyDatasetError("Cannot compute a scale domain over zero values.")
    return PAD_LOW * float(arr.min()), PAD_HIGH * float(arr.max())


def tick_increment(start: float, stop: float, count: int) -> float:
    """Round step close to (stop - start) / count: 1, 2 or 5 times a power of ten.

    Negative results mean "divide by": -5 is a step of 1/5.
    """
    step = (stop - start) / max(1, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


class LinearScale:
    """Continuous mapping from a data domain onto a fixed pixel range."""

    def __init__(self, range_: Domain, domain: Domain = (0.0, 1.0)) -> None:
        self.range = (float(range_[0]), float(range_[1]))
        self.domain = (float(domain[0]), float(domain[1]))

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> list[float]:
        lo, hi = sorted(self.domain)
        if hi == lo:
            return [lo]
        inc = tick_increment(lo, hi, count)
        if inc > 0:
            first, last = math.ceil(lo / inc), math.floor(hi / inc)
            return [i * inc for i in range(first, last + 1)]
        inc = -inc
        first, last = math.ceil(lo * inc), math.floor(hi * inc)
        return [i / inc for i in range(first, last + 1)]

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


class ScaleManager:
    """
    Owns the x and y scales of one chart.

    Pixel ranges are fixed at construction (x grows right, y grows up);
    only the domains change when the plotted metrics change.
    """

    def __init__(self, width: float, height: float) -> None:
        self.x = LinearScale((0.0, width))
        self.y = LinearScale((height, 0.0))

    def recompute(self, dataset, metric_x: str, metric_y: str) -> Tuple[Domain, Domain]:
        if len(dataset) == 0:
            raise EmptyDatasetError("Dataset has no rows; nothing to scale.")
        return padded_domain(dataset.values(metric_x)), padded_domain(dataset.values(metric_y))

    def apply(self, domain_x: Domain, domain_y: Domain) -> None:
        self.x.domain = (float(domain_x[0]), float(domain_x[1]))
        self.y.domain = (float(domain_y[0]), float(domain_y[1]))
        logger.debug("Scales set: x=%s y=%s", self.x.domain, self.y.domain)

    def scale(self, role: AxisRole) -> LinearScale:
        return self.x if role is AxisRole.X else self.y

    @property
    def domains(self) -> Tuple[Domain, Domain]:
        return self.x.domain, self.y.domain
