from __future__ import annotations

import pandas as pd
import pytest

from census_scatter import config
from census_scatter.catalog import MetricCatalog
from census_scatter.data import Dataset


@pytest.fixture
def frame() -> pd.DataFrame:
    return pd.DataFrame({
        "id": [1, 2, 3],
        "state": ["Alabama", "Texas", "Vermont"],
        "st_abbr": ["AL", "TX", "VT"],
        "per_below_poverty": [10.0, 20.0, 30.0],
        "median_income": [42830.0, 53035.0, 54447.0],
        "median_age": [38.6, 34.2, 42.6],
        "per_no_coverage": [13.9, 21.9, 5.0],
        "per_everyday_smoker": [15.6, 11.2, 12.6],
        "per_obsess": [35.6, 31.9, 24.8],
    })


@pytest.fixture
def dataset(frame) -> Dataset:
    return Dataset(frame=frame, id_columns=tuple(frame.columns[:3]), metric_columns=tuple(frame.columns[3:]))


@pytest.fixture
def catalog(dataset) -> MetricCatalog:
    return MetricCatalog.from_columns(
        dataset.metric_columns,
        labels=config.METRIC_LABELS,
        prefixes=config.TOOLTIP_PREFIXES,
        units=config.METRIC_UNITS,
    )


@pytest.fixture
def csv_path(tmp_path, frame):
    path = tmp_path / "dataset.csv"
    frame.to_csv(path, index=False)
    return path
