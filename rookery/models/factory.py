"""
Classifier Factory Module

Builds the external classification algorithm from configuration. Every
registered builder returns a scikit-learn `Pipeline` that one-hot encodes
categorical columns and hands the numeric ones to the estimator, so any
entry satisfies the same fit/predict capability and can be swapped without
touching the trainer or the evaluator.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import Callable, Dict, Protocol, runtime_checkable

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer, make_column_selector
from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder, StandardScaler

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, ModelConfig

logger = logging.getLogger(LOGGER_NAME)

# =========================================================================== #
#                               CAPABILITY                                    #
# =========================================================================== #

@runtime_checkable
class Classifier(Protocol):
    """Anything that can be fitted on a feature table and predict labels."""

    def fit(self, X: pd.DataFrame, y: pd.Series) -> "Classifier":
        ...

    def predict(self, X: pd.DataFrame) -> np.ndarray:
        ...

# =========================================================================== #
#                               BUILDERS                                      #
# =========================================================================== #

def _preprocessor(scale_numeric: bool) -> ColumnTransformer:
    numeric = StandardScaler() if scale_numeric else "passthrough"
    return ColumnTransformer(
        transformers=[
            (
                "categorical",
                OneHotEncoder(handle_unknown="ignore"),
                make_column_selector(dtype_include=["category", "object"]),
            ),
            ("numeric", numeric, make_column_selector(dtype_include=np.number)),
        ],
        remainder="drop",
    )


def build_random_forest(cfg: ModelConfig) -> Pipeline:
    """Random forest over one-hot categoricals and raw numeric features."""
    return Pipeline([
        ("preprocess", _preprocessor(scale_numeric=False)),
        ("classifier", RandomForestClassifier(
            n_estimators=cfg.n_estimators,
            max_depth=cfg.max_depth,
            random_state=cfg.seed,
        )),
    ])


def build_logistic_regression(cfg: ModelConfig) -> Pipeline:
    """Multinomial logistic regression over standardized features."""
    return Pipeline([
        ("preprocess", _preprocessor(scale_numeric=True)),
        ("classifier", LogisticRegression(
            max_iter=cfg.max_iter,
            random_state=cfg.seed,
        )),
    ])


MODEL_REGISTRY: Dict[str, Callable[[ModelConfig], Pipeline]] = {
    "random_forest": build_random_forest,
    "logistic_regression": build_logistic_regression,
}


def get_model(cfg: ModelConfig) -> Pipeline:
    """
    Factory entry point.

    Args:
        cfg: Model configuration; `cfg.name` selects the registry entry.

    Returns:
        Unfitted scikit-learn Pipeline.

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        builder = MODEL_REGISTRY[cfg.name]
    except KeyError:
        raise ValueError(
            f"Unknown model '{cfg.name}'. Available: {sorted(MODEL_REGISTRY)}"
        ) from None

    model = builder(cfg)
    logger.info(f"Classifier built: {cfg.name} (seed={cfg.seed})")
    return model
