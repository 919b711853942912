"""
Argument Parsing Module.

Handles the command-line interface of the classification pipeline and
bridges terminal inputs with the hierarchical Pydantic configuration.
"""

# =========================================================================== #
#                               Standard Imports                              #
# =========================================================================== #
import argparse
from typing import Sequence

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .config import (
    DatasetConfig,
    EvaluationConfig,
    ModelConfig,
    SplitConfig,
    TelemetryConfig,
)

# =========================================================================== #
#                              Argument Parsing                               #
# =========================================================================== #

def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Configure and parse command-line arguments for the pipeline.

    Args:
        argv: Argument list; `sys.argv[1:]` when None.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Penguin species classification: split, fit, evaluate.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    dataset_def = DatasetConfig()
    split_def = SplitConfig()
    model_def = ModelConfig()
    eval_def = EvaluationConfig()
    telemetry_def = TelemetryConfig()

    # ===== Global Strategy =====
    strat_group = parser.add_argument_group("Global Strategy")

    strat_group.add_argument(
        '--config',
        type=str,
        default=None,
        help="Path to YAML config file (overrides all CLI arguments)"
    )

    # ===== Dataset =====
    dataset_group = parser.add_argument_group("Dataset")

    dataset_group.add_argument(
        '--data_path',
        type=str,
        default=None,
        help="CSV file with penguin measurements"
    )
    dataset_group.add_argument(
        '--label_column',
        type=str,
        default=dataset_def.label_column,
        help="Categorical target column"
    )
    dataset_group.add_argument(
        '--feature_columns',
        type=str,
        nargs='+',
        default=None,
        help="Predictor columns (defaults to the penguin measurements and island)"
    )
    dataset_group.add_argument(
        '--categorical_columns',
        type=str,
        nargs='*',
        default=None,
        help="Feature columns treated as categories"
    )
    dataset_group.add_argument(
        '--drop_missing',
        action='store_true',
        default=dataset_def.drop_missing,
        help="Drop incomplete rows instead of failing"
    )

    # ===== Split =====
    split_group = parser.add_argument_group("Train/Test Split")

    split_group.add_argument(
        '--proportion',
        type=float,
        default=split_def.proportion,
        help="Fraction of rows used for training"
    )
    split_group.add_argument(
        '--split_seed',
        type=int,
        default=split_def.seed
    )

    # ===== Model =====
    model_group = parser.add_argument_group("Model Configuration")

    model_group.add_argument(
        '--model_name',
        type=str,
        default=model_def.name,
        choices=["random_forest", "logistic_regression"],
        help="Classifier identifier"
    )
    model_group.add_argument(
        '--formula',
        type=str,
        default=model_def.formula,
        help="Model formula, e.g. 'species ~ .'"
    )
    model_group.add_argument(
        '--n_estimators',
        type=int,
        default=model_def.n_estimators
    )
    model_group.add_argument(
        '--max_depth',
        type=int,
        default=None,
        help="Maximum tree depth (unlimited if omitted)"
    )
    model_group.add_argument(
        '--max_iter',
        type=int,
        default=model_def.max_iter,
        help="Solver iterations (logistic_regression only)"
    )
    model_group.add_argument(
        '--model_seed',
        type=int,
        default=model_def.seed
    )

    # ===== Evaluation & Reporting =====
    eval_group = parser.add_argument_group("Evaluation & Reporting")

    eval_group.add_argument(
        '--report_format',
        type=str,
        default=eval_def.report_format,
        choices=["xlsx", "csv", "json"],
        help="Evaluation summary format"
    )
    eval_group.add_argument(
        '--fig_dpi',
        type=int,
        default=eval_def.fig_dpi,
        help="Plot resolution (DPI)"
    )
    eval_group.add_argument(
        '--cmap_confusion',
        type=str,
        default=eval_def.cmap_confusion
    )
    eval_group.add_argument(
        '--plot_style',
        type=str,
        default=eval_def.plot_style,
        help="Matplotlib style (e.g., 'ggplot', 'seaborn-v0_8-muted')"
    )
    eval_group.add_argument(
        '--no_plots',
        action='store_false',
        dest='save_plots',
        default=eval_def.save_plots,
        help="Skip exploratory and confusion matrix plots"
    )

    # ===== Paths & Logging =====
    path_group = parser.add_argument_group("Paths & Logging")

    path_group.add_argument(
        '--output_dir',
        type=str,
        default=str(telemetry_def.output_dir),
        help="Base directory for run outputs"
    )
    path_group.add_argument(
        '--log_level',
        type=str,
        default=telemetry_def.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    path_group.add_argument(
        '--project_name',
        type=str,
        default=telemetry_def.project_name
    )

    return parser.parse_args(argv)
