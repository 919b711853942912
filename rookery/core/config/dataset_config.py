"""
Dataset Schema Configuration.

Declares where the observation table lives and which of its columns play the
label and feature roles. Defaults describe the Palmer penguins measurements:
a three-valued `species` label, four numeric body measurements and the
categorical `island`.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse
from typing import Optional, Tuple

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, model_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .types import ColumnName, FilePath

# =========================================================================== #
#                          Dataset Configuration                              #
# =========================================================================== #

PENGUIN_LABEL = "species"
PENGUIN_NUMERIC_FEATURES = (
    "bill_length_mm",
    "bill_depth_mm",
    "flipper_length_mm",
    "body_mass_g",
)
PENGUIN_CATEGORICAL_FEATURES = ("island",)


class DatasetConfig(BaseModel):
    """
    Validated manifest of the input table.

    Attributes:
        data_path: CSV file to load. Optional so that defaults can be
            instantiated for CLI help; the pipeline refuses to run without it.
        label_column: Categorical target column.
        feature_columns: Columns kept as predictors, in order.
        categorical_columns: Subset of `feature_columns` treated as categories.
        drop_missing: Explicitly drop incomplete rows instead of failing.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    data_path: Optional[FilePath] = Field(default=None, description="Input CSV file")
    label_column: ColumnName = Field(default=PENGUIN_LABEL)
    feature_columns: Tuple[ColumnName, ...] = Field(
        default=PENGUIN_NUMERIC_FEATURES + PENGUIN_CATEGORICAL_FEATURES
    )
    categorical_columns: Tuple[ColumnName, ...] = Field(default=PENGUIN_CATEGORICAL_FEATURES)
    drop_missing: bool = Field(
        default=False,
        description="Drop rows with missing values (logged) instead of raising"
    )

    @model_validator(mode="after")
    def validate_columns(self) -> "DatasetConfig":
        """Label must not double as a feature; categoricals must be features."""
        if not self.feature_columns:
            raise ValueError("At least one feature column is required.")
        if self.label_column in self.feature_columns:
            raise ValueError(f"Label column '{self.label_column}' cannot also be a feature.")
        if len(set(self.feature_columns)) != len(self.feature_columns):
            raise ValueError("Feature columns must be unique.")
        unknown = [c for c in self.categorical_columns if c not in self.feature_columns]
        if unknown:
            raise ValueError(f"Categorical columns {unknown} are not listed as features.")
        return self

    # --- Properties ---
    @property
    def dataset_name(self) -> str:
        """Dataset identifier derived from the CSV stem."""
        return self.data_path.stem if self.data_path is not None else "penguins"

    @property
    def numeric_columns(self) -> Tuple[str, ...]:
        """Feature columns not flagged as categorical."""
        return tuple(c for c in self.feature_columns if c not in self.categorical_columns)

    @property
    def required_columns(self) -> Tuple[str, ...]:
        return (self.label_column,) + tuple(self.feature_columns)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DatasetConfig":
        """Factory mapping CLI arguments onto the schema."""
        params = {
            k: getattr(args, k)
            for k in cls.model_fields
            if getattr(args, k, None) is not None
        }
        # Default categoricals follow a custom feature list
        if "feature_columns" in params and "categorical_columns" not in params:
            params["categorical_columns"] = tuple(
                c for c in PENGUIN_CATEGORICAL_FEATURES if c in params["feature_columns"]
            )
        return cls(**params)
