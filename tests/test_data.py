from __future__ import annotations

import numpy as np
import pytest

from census_scatter import config
from census_scatter.data import clean_numeric_column, load_dataset
from census_scatter.errors import DatasetLoadError


def test_load_dataset_splits_identifiers_and_metrics(csv_path) -> None:
    ds = load_dataset(csv_path)
    assert ds.id_columns == ("id", "state", "st_abbr")
    assert ds.metric_columns == tuple(config.METRIC_COLUMNS)
    assert len(ds) == 3
    assert ds.row_ids == ["1", "2", "3"]
    assert ds.names == ["Alabama", "Texas", "Vermont"]
    assert ds.short_labels == ["AL", "TX", "VT"]
    assert ds.values("per_below_poverty").tolist() == [10.0, 20.0, 30.0]


def test_metric_columns_are_coerced_to_float(tmp_path) -> None:
    path = tmp_path / "messy.csv"
    path.write_text(
        "id,state,st_abbr,a,b\n"
        '1,Alabama,AL,12%,"42,830"\n'
        "2,Texas,TX,n/a,$53035\n"
    )
    ds = load_dataset(path)
    assert ds.frame["a"].dtype == float
    assert ds.values("a").tolist() == [12.0]
    assert ds.values("b").tolist() == [42830.0, 53035.0]
    assert np.isnan(ds.column("a")[1])


def test_missing_file_is_fatal(tmp_path) -> None:
    with pytest.raises(DatasetLoadError):
        load_dataset(tmp_path / "nope.csv")


def test_empty_file_is_fatal(tmp_path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_odd_metric_count_is_fatal(tmp_path) -> None:
    path = tmp_path / "odd.csv"
    path.write_text("id,state,st_abbr,a,b,c\n1,Alabama,AL,1,2,3\n")
    with pytest.raises(DatasetLoadError, match="even number"):
        load_dataset(path)


def test_values_rejects_identifier_columns(dataset) -> None:
    with pytest.raises(KeyError):
        dataset.values("state")


def test_clean_numeric_column_handles_units() -> None:
    import pandas as pd

    out = clean_numeric_column(pd.Series(["1,200", "15%", "", "NA", "abc"]))
    assert out.iloc[0] == 1200.0
    assert out.iloc[1] == 15.0
    assert out.iloc[2:].isna().all()


def test_bundled_dataset_loads() -> None:
    ds = load_dataset(config.DATASET_PATH)
    assert len(ds) == 51
    assert ds.metric_columns == tuple(config.METRIC_COLUMNS)
    assert not ds.frame[list(ds.metric_columns)].isna().any().any()
