"""
Evaluation and Reporting Package

This package coordinates inference on the testing subset, confusion-matrix
metrics, visualization and structured run reporting.
"""

# =========================================================================== #
#                                Metrics                                      #
# =========================================================================== #
from .metrics import (
    PRED_COLUMN,
    accuracy_from_confusion,
    build_confusion_matrix,
    compute_metrics,
    lookup_metric,
    per_class_ppv,
    per_class_sensitivity,
)

# =========================================================================== #
#                                Inference Engine                             #
# =========================================================================== #
from .engine import (
    EvaluationResult,
    augment_predictions,
    evaluate_model,
    predict_classes,
)

# =========================================================================== #
#                                Visualizations                               #
# =========================================================================== #
from .visualization import plot_confusion_matrix, plot_feature_distributions

# =========================================================================== #
#                                Structured Reporting                         #
# =========================================================================== #
from .reporting import (
    EvaluationReport,
    create_evaluation_report,
    save_evaluation_tables,
)

# =========================================================================== #
#                                Evaluation Pipeline                          #
# =========================================================================== #
from .pipeline import run_final_evaluation
