"""
Model Trainer Module

This module defines the `ModelTrainer`, which passes the training subset and
the formula to the external classification algorithm and captures the fitted
artifact. The algorithm itself is opaque: any object satisfying the
`Classifier` capability can be trained.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd
from sklearn.base import clone

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, ModelConfig, TrainingFailureError
from rookery.models import Classifier, get_model
from .formula import Formula

# =========================================================================== #
#                                FITTED MODEL                                 #
# =========================================================================== #
# Global logger instance
logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class FittedModel:
    """
    Read-only handle on a trained classifier.

    Attributes:
        estimator: The fitted external algorithm.
        formula: Formula the model was trained with.
        feature_names: Columns fed to the estimator, in order.
        classes: Label domain in canonical order.
        n_train: Number of training rows.
    """
    estimator: Classifier
    formula: Formula
    feature_names: Tuple[str, ...]
    classes: Tuple[str, ...]
    n_train: int

    @property
    def label(self) -> str:
        return self.formula.label


def label_domain(labels: pd.Series) -> Tuple[str, ...]:
    """Canonical class order: categorical categories, else sorted values."""
    if isinstance(labels.dtype, pd.CategoricalDtype):
        return tuple(str(c) for c in labels.cat.categories)
    return tuple(sorted(str(v) for v in labels.dropna().unique()))

# =========================================================================== #
#                                TRAINING LOGIC                               #
# =========================================================================== #

class ModelTrainer:
    """
    Fits a classifier on a training subset according to a formula.

    The estimator passed in is never mutated; each `train` call fits a fresh
    clone, so one trainer can be reused across splits.
    """

    def __init__(
        self,
        estimator: Classifier,
        formula: Formula,
        seed: Optional[int] = None,
    ):
        """
        Args:
            estimator: Unfitted external algorithm.
            formula: Label and feature selection.
            seed: When given, written to every `random_state` parameter of
                the estimator (and of nested pipeline steps).
        """
        self.estimator = estimator
        self.formula = formula
        self.seed = seed

    def _fresh_estimator(self) -> Classifier:
        try:
            estimator = clone(self.estimator)
        except TypeError:
            # Not a scikit-learn estimator; use it as is.
            estimator = self.estimator

        if self.seed is not None and hasattr(estimator, "get_params"):
            seeded = {
                name: self.seed
                for name in estimator.get_params(deep=True)
                if name == "random_state" or name.endswith("__random_state")
            }
            if seeded:
                estimator.set_params(**seeded)
        return estimator

    def _validate(self, train: pd.DataFrame) -> Tuple[str, ...]:
        if train is None or len(train) == 0:
            raise TrainingFailureError("Training subset is empty.")

        label = self.formula.label
        if label not in train.columns:
            raise TrainingFailureError(f"Label column '{label}' not found in training subset.")

        features = self.formula.resolve_features(list(train.columns))
        missing = [f for f in features if f not in train.columns]
        if missing:
            raise TrainingFailureError(f"Formula feature(s) {missing} not found in training subset.")
        if not features:
            raise TrainingFailureError(f"Formula '{self.formula}' selects no feature columns.")

        n_distinct = train[label].nunique(dropna=True)
        if n_distinct < 2:
            raise TrainingFailureError(
                f"Label '{label}' has {n_distinct} distinct value(s) in the training "
                f"subset; at least 2 are required."
            )
        return features

    def train(self, train: pd.DataFrame) -> FittedModel:
        """
        Fits the estimator on the formula's features and label.

        Args:
            train: Training subset.

        Returns:
            FittedModel wrapping the trained estimator.

        Raises:
            TrainingFailureError: Empty subset, missing label or features,
                fewer than 2 classes, or an error raised by the algorithm.
        """
        features = self._validate(train)
        label = self.formula.label

        X = train.loc[:, list(features)]
        y = train[label]
        estimator = self._fresh_estimator()

        logger.info(
            f"Fitting {type(estimator).__name__} on {len(train)} rows "
            f"({len(features)} features) → formula: {self.formula}"
        )
        try:
            estimator.fit(X, y)
        except (ValueError, TypeError) as exc:
            raise TrainingFailureError(f"Classifier could not be fitted: {exc}") from exc

        fitted = FittedModel(
            estimator=estimator,
            formula=self.formula,
            feature_names=tuple(features),
            classes=label_domain(y),
            n_train=len(train),
        )
        logger.info(f"Training finished. Classes: {list(fitted.classes)}")
        return fitted


def fit_model(train: pd.DataFrame, cfg: ModelConfig) -> FittedModel:
    """
    Convenience entry point: builds the configured classifier and trains it.

    Args:
        train: Training subset.
        cfg: Model configuration (algorithm, formula, seed).
    """
    trainer = ModelTrainer(
        estimator=get_model(cfg),
        formula=Formula.parse(cfg.formula),
        seed=cfg.seed,
    )
    return trainer.train(train)
