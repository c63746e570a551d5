from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from census_scatter import config
from census_scatter.errors import DatasetLoadError

logger = logging.getLogger(__name__)


# -----------------------------
# HELPERS
# -----------------------------
def clean_numeric_column(series: pd.Series) -> pd.Series:
    s = series.astype(str).str.replace(",", "", regex=False)
    for u in ["%", "$", " USD", " usd"]:
        s = s.str.replace(u, "", case=False, regex=False)
    s = s.str.strip().replace({"NA": np.nan, "": np.nan, "nan": np.nan})
    return pd.to_numeric(s, errors="coerce")


@dataclass(frozen=True, eq=False)
class Dataset:
    """Loaded rows: identifier columns followed by numeric metric columns."""
    frame: pd.DataFrame
    id_columns: tuple[str, ...]
    metric_columns: tuple[str, ...]
    name_col: str = config.NAME_COL
    abbr_col: str = config.ABBR_COL

    def __len__(self) -> int:
        return len(self.frame)

    def values(self, metric: str) -> np.ndarray:
        if metric not in self.metric_columns:
            raise KeyError(metric)
        return self.frame[metric].dropna().to_numpy(dtype=float)

    def column(self, metric: str) -> np.ndarray:
        """Metric values aligned with the rows (NaN kept)."""
        return self.frame[metric].to_numpy(dtype=float)

    @property
    def row_ids(self) -> list[str]:
        return [str(i) for i in self.frame[self.id_columns[0]]]

    @property
    def names(self) -> list[str]:
        col = self.name_col if self.name_col in self.frame.columns else self.id_columns[0]
        return self.frame[col].astype(str).tolist()

    @property
    def short_labels(self) -> list[str]:
        col = self.abbr_col if self.abbr_col in self.frame.columns else self.id_columns[-1]
        return self.frame[col].astype(str).tolist()


def load_dataset(path: Union[str, Path] = config.DATASET_PATH,
                 id_columns: int = config.ID_COLUMN_COUNT) -> Dataset:
    """
    Read the CSV wholesale and coerce every metric column to float.

    Raises DatasetLoadError when the file is missing, cannot be parsed, or
    does not leave an even, non-zero number of metric columns.
    """
    path = Path(path)
    try:
        df = pd.read_csv(path)
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset not found: {path}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Could not parse {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    ids = tuple(df.columns[:id_columns])
    metrics = tuple(df.columns[id_columns:])
    if len(ids) < id_columns:
        raise DatasetLoadError(f"{path} has fewer than {id_columns} identifier columns.")
    if not metrics or len(metrics) % 2:
        raise DatasetLoadError(
            f"{path} must have an even number of metric columns after the identifiers, got {len(metrics)}."
        )

    for c in metrics:
        col = clean_numeric_column(df[c])
        bad = int(col.isna().sum() - df[c].isna().sum())
        if bad > 0:
            logger.warning("Column %s: %d non-numeric values coerced to NaN", c, bad)
        df[c] = col.astype(float)

    logger.info("Loaded %s: %d rows, %d metrics", path.name, len(df), len(metrics))
    return Dataset(frame=df, id_columns=ids, metric_columns=metrics)
