"""
Exploratory Summary Statistics.

Tabular overviews computed before modelling: per-class counts and means of
the numeric features, and the standard `describe()` profile.
"""

import logging
from typing import Sequence

import pandas as pd

from rookery.core import LOGGER_NAME, LogStyle

logger = logging.getLogger(LOGGER_NAME)


def describe_features(table: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """count/mean/std/min/quartiles/max of the given numeric columns."""
    return table.loc[:, list(columns)].describe()


def summarize_observations(
    table: pd.DataFrame,
    label_column: str,
    numeric_columns: Sequence[str],
) -> pd.DataFrame:
    """
    Per-class row count and feature means.

    Returns:
        DataFrame indexed by class (canonical order) with an `n` column
        followed by one `mean_<feature>` column per numeric feature.
    """
    grouped = table.groupby(label_column, observed=False)
    means = grouped[list(numeric_columns)].mean().add_prefix("mean_")
    counts = grouped.size().rename("n")
    return pd.concat([counts, means], axis=1)


def log_class_summary(summary: pd.DataFrame) -> None:
    """Writes the per-class summary to the run log."""
    logger.info("[EXPLORATION] per-class counts and feature means")
    for line in summary.to_string(float_format=lambda v: f"{v:.2f}").splitlines():
        logger.info(f"{LogStyle.INDENT}{line}")


def log_feature_profile(profile: pd.DataFrame) -> None:
    """Writes the `describe()` profile of the numeric features to the run log."""
    logger.info("[EXPLORATION] numeric feature profile")
    for line in profile.to_string(float_format=lambda v: f"{v:.2f}").splitlines():
        logger.info(f"{LogStyle.INDENT}{line}")
