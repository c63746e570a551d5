from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class AxisRole(str, Enum):
    """Which axis a metric label belongs to."""
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class SelectionState:
    """The two metrics currently plotted. Single source of truth for the chart."""
    active_x: str
    active_y: str

    def active(self, role: AxisRole) -> str:
        return self.active_x if role is AxisRole.X else self.active_y

    def with_metric(self, role: AxisRole, key: str) -> SelectionState:
        if role is AxisRole.X:
            return replace(self, active_x=key)
        return replace(self, active_y=key)

    # Round-trip through the browser-side dcc.Store
    def to_dict(self) -> dict[str, str]:
        return {"x": self.active_x, "y": self.active_y}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> SelectionState:
        return cls(active_x=data["x"], active_y=data["y"])
