"""
Data Handling Package

Loading and validation of the observation table, exploratory summaries and
the seeded train/test split.
"""

# =========================================================================== #
#                                Loading                                      #
# =========================================================================== #
from .loader import (
    check_missing_values,
    load_observations,
    prepare_observations,
    validate_schema,
)

# =========================================================================== #
#                                Exploration                                  #
# =========================================================================== #
from .exploration import (
    describe_features,
    log_class_summary,
    log_feature_profile,
    summarize_observations,
)

# =========================================================================== #
#                                Splitting                                    #
# =========================================================================== #
from .splitter import DataSplit, split_observations, training_size

__all__ = [
    "load_observations",
    "prepare_observations",
    "validate_schema",
    "check_missing_values",
    "describe_features",
    "summarize_observations",
    "log_class_summary",
    "log_feature_profile",
    "DataSplit",
    "split_observations",
    "training_size",
]
