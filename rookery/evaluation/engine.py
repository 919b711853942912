"""
Inference Engine.

Applies a fitted model to the testing subset and assembles the evaluation
tables. Only the model's feature columns reach the estimator; the label
column is never part of the prediction input.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd
from sklearn.base import BaseEstimator
from sklearn.exceptions import NotFittedError
from sklearn.utils.validation import check_is_fitted

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, EvaluationFailureError
from rookery.trainer import FittedModel
from .metrics import (
    PRED_COLUMN,
    build_confusion_matrix,
    compute_metrics,
    lookup_metric,
    resolve_classes,
)

logger = logging.getLogger(LOGGER_NAME)

# =========================================================================== #
#                               RESULT CONTAINER                              #
# =========================================================================== #

@dataclass(frozen=True)
class EvaluationResult:
    """
    Outputs of the evaluation stage.

    Attributes:
        predictions: One `.pred_class` row per test row, same index.
        augmented: Test subset with the `.pred_class` column appended.
        confusion: Truth x prediction counts.
        metrics: Long metrics table.
    """
    predictions: pd.DataFrame
    augmented: pd.DataFrame
    confusion: pd.DataFrame
    metrics: pd.DataFrame

    @property
    def accuracy(self) -> float:
        return lookup_metric(self.metrics, "accuracy")

    @property
    def classes(self) -> list[str]:
        return [str(c) for c in self.confusion.index]

    def metric(self, name: str, cls: Optional[str] = None) -> float:
        """Overall value of `name`, or its value for class `cls`."""
        return lookup_metric(self.metrics, name, cls)

# =========================================================================== #
#                                 INFERENCE                                   #
# =========================================================================== #

def _ensure_fitted(model: Optional[FittedModel]) -> None:
    if model is None or getattr(model, "estimator", None) is None:
        raise EvaluationFailureError("Model was never fitted.")
    if isinstance(model.estimator, BaseEstimator):
        try:
            check_is_fitted(model.estimator)
        except NotFittedError as exc:
            raise EvaluationFailureError(f"Model was never fitted: {exc}") from exc


def predict_classes(model: FittedModel, test: pd.DataFrame) -> pd.DataFrame:
    """
    Predicts one label per test row.

    Args:
        model: Trained model handle.
        test: Testing subset (label column may be present; it is ignored).

    Returns:
        DataFrame with a single `.pred_class` column, index aligned with `test`.

    Raises:
        EvaluationFailureError: Empty subset, unfitted model, missing feature
            columns, or an error raised by the estimator.
    """
    if test is None or len(test) == 0:
        raise EvaluationFailureError("Testing subset is empty.")
    _ensure_fitted(model)

    missing = [c for c in model.feature_names if c not in test.columns]
    if missing:
        raise EvaluationFailureError(f"Feature column(s) {missing} not found in testing subset.")

    X = test.loc[:, list(model.feature_names)]
    try:
        labels = model.estimator.predict(X)
    except (ValueError, TypeError) as exc:
        raise EvaluationFailureError(f"Prediction failed: {exc}") from exc

    if len(labels) != len(test):
        raise EvaluationFailureError(
            f"Estimator returned {len(labels)} predictions for {len(test)} rows."
        )

    categories = resolve_classes(model.classes, labels)
    predicted = pd.Categorical([str(v) for v in labels], categories=categories)
    return pd.DataFrame({PRED_COLUMN: predicted}, index=test.index)


def augment_predictions(test: pd.DataFrame, predictions: pd.DataFrame) -> pd.DataFrame:
    """
    Positional join of the testing subset with its predictions.

    Raises:
        EvaluationFailureError: If the row counts differ.
    """
    if len(test) != len(predictions):
        raise EvaluationFailureError(
            f"Cannot join {len(predictions)} predictions with {len(test)} test rows."
        )
    augmented = test.copy()
    augmented[PRED_COLUMN] = predictions[PRED_COLUMN].to_numpy()
    return augmented


def evaluate_model(
    model: FittedModel,
    test: pd.DataFrame,
    classes: Optional[Sequence[str]] = None,
) -> EvaluationResult:
    """
    Predicts, joins, cross-tabulates and scores.

    Args:
        model: Trained model handle.
        test: Testing subset including the label column.
        classes: Canonical label order; defaults to the model's classes.

    Returns:
        EvaluationResult bundling every evaluation table.
    """
    predictions = predict_classes(model, test)

    label = model.label
    if label not in test.columns:
        raise EvaluationFailureError(f"Label column '{label}' not found in testing subset.")

    augmented = augment_predictions(test, predictions)
    confusion = build_confusion_matrix(
        truth=augmented[label],
        predicted=augmented[PRED_COLUMN],
        classes=classes if classes is not None else model.classes,
    )
    metrics = compute_metrics(confusion)

    result = EvaluationResult(
        predictions=predictions,
        augmented=augmented,
        confusion=confusion,
        metrics=metrics,
    )
    logger.info(f"Evaluated {len(test)} test rows → accuracy {result.accuracy:.4f}")
    return result
