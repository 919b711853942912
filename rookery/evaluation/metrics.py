"""
Confusion Matrix & Derived Metrics.

Cross-tabulates truth against prediction and derives accuracy plus per-class
sensitivity (recall) and positive predictive value (precision). A metric whose
denominator is zero (a class absent from the truth or never predicted) is
reported as NaN rather than raising.

Metrics table layout (one row per value)::

    .metric       .estimator   class    .estimate
    accuracy      multiclass   None     0.9700
    sensitivity   macro        None     0.9650
    ppv           macro        None     0.9712
    sensitivity   per_class    Adelie   1.0000
    ...
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from typing import Iterable, Optional, Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import pandas as pd
from sklearn.metrics import confusion_matrix

# =========================================================================== #
#                                CONSTANTS                                    #
# =========================================================================== #

PRED_COLUMN = ".pred_class"
METRIC_COLUMNS = [".metric", ".estimator", "class", ".estimate"]

ACCURACY = "accuracy"
SENSITIVITY = "sensitivity"
PPV = "ppv"

# =========================================================================== #
#                                CONFUSION MATRIX                             #
# =========================================================================== #

def resolve_classes(
    classes: Sequence[str],
    *label_sets: Iterable,
) -> list[str]:
    """
    Canonical class list: `classes` first, then any extra label observed in
    `label_sets`, sorted. Keeps every observation inside the matrix.
    """
    ordered = [str(c) for c in classes]
    known = set(ordered)
    extra = sorted({str(v) for labels in label_sets for v in labels} - known)
    return ordered + extra


def build_confusion_matrix(
    truth: Sequence,
    predicted: Sequence,
    classes: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Counts (truth, prediction) pairs.

    Args:
        truth: Ground-truth labels.
        predicted: Predicted labels, aligned with `truth`.
        classes: Canonical label order; labels outside it are appended.

    Returns:
        Square integer DataFrame, rows = truth, columns = prediction.

    Raises:
        ValueError: If the sequences differ in length.
    """
    y_true = np.asarray(truth, dtype=object).astype(str)
    y_pred = np.asarray(predicted, dtype=object).astype(str)
    if y_true.shape != y_pred.shape:
        raise ValueError(
            f"Truth and prediction lengths differ: {len(y_true)} vs {len(y_pred)}"
        )

    labels = resolve_classes(classes if classes is not None else [], y_true, y_pred)
    if len(y_true) == 0:
        cm = np.zeros((len(labels), len(labels)), dtype=np.int64)
    else:
        cm = confusion_matrix(y_true, y_pred, labels=labels)

    return pd.DataFrame(
        cm.astype(np.int64),
        index=pd.Index(labels, name="Truth"),
        columns=pd.Index(labels, name="Prediction"),
    )

# =========================================================================== #
#                                 METRICS                                     #
# =========================================================================== #

def _safe_ratio(numerator: np.ndarray, denominator: np.ndarray) -> np.ndarray:
    out = np.full(numerator.shape, np.nan, dtype=float)
    np.divide(numerator, denominator, out=out, where=denominator > 0)
    return out


def _macro(values: np.ndarray) -> float:
    defined = values[~np.isnan(values)]
    return float(defined.mean()) if defined.size else float("nan")


def accuracy_from_confusion(confusion: pd.DataFrame) -> float:
    """Sum of the diagonal over the total count (NaN for an empty matrix)."""
    cm = confusion.to_numpy()
    total = cm.sum()
    return float(np.trace(cm) / total) if total > 0 else float("nan")


def per_class_sensitivity(confusion: pd.DataFrame) -> pd.Series:
    """TP / (TP + FN) per class; NaN where the class is absent from the truth."""
    cm = confusion.to_numpy()
    tp = np.diag(cm).astype(float)
    return pd.Series(_safe_ratio(tp, cm.sum(axis=1).astype(float)), index=confusion.index.astype(str))


def per_class_ppv(confusion: pd.DataFrame) -> pd.Series:
    """TP / (TP + FP) per class; NaN where the class is never predicted."""
    cm = confusion.to_numpy()
    tp = np.diag(cm).astype(float)
    return pd.Series(_safe_ratio(tp, cm.sum(axis=0).astype(float)), index=confusion.columns.astype(str))


def compute_metrics(confusion: pd.DataFrame) -> pd.DataFrame:
    """
    Derives the metrics table from a confusion matrix.

    Overall sensitivity and PPV are macro averages of the defined per-class
    values; they are NaN only if no class value is defined.

    Returns:
        Long DataFrame with columns `.metric`, `.estimator`, `class`,
        `.estimate`.
    """
    sensitivity = per_class_sensitivity(confusion)
    ppv = per_class_ppv(confusion)

    rows = [
        (ACCURACY, "multiclass", None, accuracy_from_confusion(confusion)),
        (SENSITIVITY, "macro", None, _macro(sensitivity.to_numpy())),
        (PPV, "macro", None, _macro(ppv.to_numpy())),
    ]
    rows += [(SENSITIVITY, "per_class", cls, float(v)) for cls, v in sensitivity.items()]
    rows += [(PPV, "per_class", cls, float(v)) for cls, v in ppv.items()]

    return pd.DataFrame(rows, columns=METRIC_COLUMNS)


def lookup_metric(metrics: pd.DataFrame, name: str, cls: Optional[str] = None) -> float:
    """
    Reads a single value from a metrics table.

    Args:
        metrics: Table produced by `compute_metrics`.
        name: `.metric` value (accuracy, sensitivity, ppv).
        cls: Class name for per-class values; None for the overall value.

    Raises:
        KeyError: If no such row exists.
    """
    if cls is None:
        mask = (metrics[".metric"] == name) & metrics["class"].isna()
    else:
        mask = (metrics[".metric"] == name) & (metrics["class"] == cls)
    selected = metrics.loc[mask, ".estimate"]
    if selected.empty:
        raise KeyError(f"No metric '{name}' for class {cls!r}")
    return float(selected.iloc[0])
