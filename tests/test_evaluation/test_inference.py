"""
Test Suite for the Inference Engine.

Prediction alignment, label leakage, positional join and failure modes.
"""

from unittest.mock import MagicMock

import numpy as np
import pandas as pd
import pytest
from sklearn.ensemble import RandomForestClassifier

from rookery.core import EvaluationFailureError, ModelConfig
from rookery.data_handler import split_observations
from rookery.evaluation import (
    PRED_COLUMN,
    EvaluationResult,
    augment_predictions,
    evaluate_model,
    predict_classes,
)
from rookery.trainer import FittedModel, Formula, fit_model


# FIXTURES
@pytest.fixture
def split(penguin_table):
    return split_observations(penguin_table, proportion=0.7, seed=2056)


@pytest.fixture
def fitted(split):
    return fit_model(split.train, ModelConfig(n_estimators=25, seed=2056))


# PREDICTION
@pytest.mark.unit
def test_one_prediction_per_row_in_order(fitted, split):
    predictions = predict_classes(fitted, split.test)

    assert list(predictions.columns) == [PRED_COLUMN]
    assert list(predictions.index) == list(split.test.index)
    assert list(predictions[PRED_COLUMN].cat.categories) == ["Adelie", "Chinstrap", "Gentoo"]


@pytest.mark.unit
def test_label_column_never_reaches_estimator(split):
    estimator = MagicMock()
    estimator.predict.side_effect = lambda X: np.array(["Adelie"] * len(X))
    model = FittedModel(
        estimator=estimator,
        formula=Formula.parse("species ~ ."),
        feature_names=("bill_length_mm", "island"),
        classes=("Adelie", "Chinstrap", "Gentoo"),
        n_train=70,
    )

    predict_classes(model, split.test)

    X = estimator.predict.call_args.args[0]
    assert list(X.columns) == ["bill_length_mm", "island"]


@pytest.mark.unit
def test_augment_is_positional(split):
    predictions = pd.DataFrame({PRED_COLUMN: ["Gentoo"] * split.n_test}, index=range(split.n_test))

    augmented = augment_predictions(split.test, predictions)

    assert list(augmented.index) == list(split.test.index)
    assert (augmented[PRED_COLUMN] == "Gentoo").all()


@pytest.mark.unit
def test_augment_length_mismatch(split):
    predictions = pd.DataFrame({PRED_COLUMN: ["Gentoo"]})

    with pytest.raises(EvaluationFailureError):
        augment_predictions(split.test, predictions)


# EVALUATION
@pytest.mark.unit
def test_evaluate_model_end_to_end(fitted, split):
    result = evaluate_model(fitted, split.test)

    assert isinstance(result, EvaluationResult)
    assert result.confusion.to_numpy().sum() == split.n_test
    assert result.classes == ["Adelie", "Chinstrap", "Gentoo"]
    matches = (result.augmented["species"].astype(str) == result.augmented[PRED_COLUMN].astype(str))
    assert result.accuracy == pytest.approx(matches.mean())
    assert result.accuracy >= 0.9


# FAILURES
@pytest.mark.unit
def test_empty_test_subset(fitted, split):
    with pytest.raises(EvaluationFailureError, match="empty"):
        evaluate_model(fitted, split.test.iloc[0:0])


@pytest.mark.unit
def test_model_none(split):
    with pytest.raises(EvaluationFailureError, match="never fitted"):
        predict_classes(None, split.test)


@pytest.mark.unit
def test_unfitted_estimator(split):
    model = FittedModel(
        estimator=RandomForestClassifier(),
        formula=Formula.parse("species ~ ."),
        feature_names=("bill_length_mm",),
        classes=("Adelie", "Chinstrap", "Gentoo"),
        n_train=0,
    )

    with pytest.raises(EvaluationFailureError, match="never fitted") as excinfo:
        predict_classes(model, split.test)

    assert excinfo.value.stage == "evaluator"


@pytest.mark.unit
def test_missing_feature_in_test(fitted, split):
    with pytest.raises(EvaluationFailureError, match="island"):
        predict_classes(fitted, split.test.drop(columns="island"))


@pytest.mark.unit
def test_missing_label_in_test(fitted, split):
    with pytest.raises(EvaluationFailureError, match="species"):
        evaluate_model(fitted, split.test.drop(columns="species"))
