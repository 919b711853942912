"""
Observation Table Loader.

Reads the input CSV into a pandas DataFrame restricted to the configured
label and feature columns, validates the schema and the absence of missing
values, and normalizes dtypes:

    * the label and categorical features become `Categorical` columns whose
      categories are sorted, which fixes the canonical class order used by
      the confusion matrix;
    * numeric features are coerced to floats; non-numeric text is a schema
      error, not a missing value.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import (
    LOGGER_NAME,
    DataQualityError,
    DatasetConfig,
    InvalidArgumentError,
)

logger = logging.getLogger(LOGGER_NAME)

# =========================================================================== #
#                                VALIDATION                                   #
# =========================================================================== #

def validate_schema(table: pd.DataFrame, required: Sequence[str]) -> None:
    """
    Ensures the table is non-empty and exposes every required column.

    Raises:
        InvalidArgumentError: On an empty table or missing columns.
    """
    missing = [c for c in required if c not in table.columns]
    if missing:
        raise InvalidArgumentError(
            f"Malformed schema: missing column(s) {missing}; found {list(table.columns)}",
            stage="loader",
        )
    if table.empty:
        raise InvalidArgumentError("Observation table is empty.", stage="loader")


def check_missing_values(table: pd.DataFrame) -> None:
    """
    Surfaces missing values instead of repairing them.

    Raises:
        DataQualityError: With per-column counts if any cell is missing.
    """
    counts = table.isna().sum()
    counts = counts[counts > 0]
    if not counts.empty:
        missing = {str(k): int(v) for k, v in counts.items()}
        rows = int(table.isna().any(axis=1).sum())
        raise DataQualityError(
            f"{rows} row(s) contain missing values: {missing}",
            missing_counts=missing,
        )


def _coerce_numeric(table: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Casts numeric feature columns to float, rejecting stray text."""
    for col in columns:
        converted = pd.to_numeric(table[col], errors="coerce")
        bad = converted.isna() & table[col].notna()
        if bad.any():
            examples = table.loc[bad, col].astype(str).unique()[:3].tolist()
            raise InvalidArgumentError(
                f"Column '{col}' must be numeric; found values {examples}",
                stage="loader",
            )
        table[col] = converted.astype(float)
    return table


def _as_sorted_categorical(series: pd.Series) -> pd.Series:
    categories = sorted(series.dropna().astype(str).unique())
    return pd.Categorical(series.astype(str), categories=categories)

# =========================================================================== #
#                                 LOADING                                     #
# =========================================================================== #

def prepare_observations(raw: pd.DataFrame, cfg: DatasetConfig) -> pd.DataFrame:
    """
    Turns a raw frame into a validated observation table.

    Args:
        raw: Frame as read from disk (extra columns allowed).
        cfg: Dataset schema.

    Returns:
        New DataFrame holding label + feature columns with a fresh RangeIndex.

    Raises:
        InvalidArgumentError: Malformed schema or empty table.
        DataQualityError: Missing values while `drop_missing` is off.
    """
    validate_schema(raw, cfg.required_columns)
    table = raw.loc[:, list(cfg.required_columns)].copy()

    if cfg.drop_missing:
        before = len(table)
        table = table.dropna()
        dropped = before - len(table)
        if dropped:
            logger.warning(f"Dropped {dropped} incomplete row(s) out of {before}.")
        if table.empty:
            raise InvalidArgumentError("No complete rows left after dropping missing values.", stage="loader")
    else:
        check_missing_values(table)

    table = _coerce_numeric(table, cfg.numeric_columns)
    table[cfg.label_column] = _as_sorted_categorical(table[cfg.label_column])
    for col in cfg.categorical_columns:
        table[col] = _as_sorted_categorical(table[col])

    return table.reset_index(drop=True)


def load_observations(path: Path | str, cfg: DatasetConfig) -> pd.DataFrame:
    """
    Reads and validates the observation table from a CSV file.

    `NA` and empty cells are read as missing values.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    raw = pd.read_csv(path, na_values=["NA", ""])
    table = prepare_observations(raw, cfg)

    classes = list(table[cfg.label_column].cat.categories)
    logger.info(
        f"Loaded {len(table)} observations from {path.name} → "
        f"{len(cfg.feature_columns)} features, {len(classes)} classes {classes}"
    )
    return table
