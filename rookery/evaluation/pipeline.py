"""
Evaluation Pipeline

Coordinates inference, metric reporting, visualization and structured
summaries for the testing subset.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, Config, Reporter, RunPaths
from rookery.trainer import FittedModel
from .engine import EvaluationResult, evaluate_model
from .reporting import create_evaluation_report, save_evaluation_tables
from .visualization import plot_confusion_matrix

# =========================================================================== #
#                               EVALUATION PIPELINE                           #
# =========================================================================== #
# Global logger instance
logger = logging.getLogger(LOGGER_NAME)


def run_final_evaluation(
    model: FittedModel,
    test: pd.DataFrame,
    split_summary: Dict[str, float],
    paths: RunPaths,
    cfg: Config,
    reporter: Optional[Reporter] = None,
) -> Tuple[EvaluationResult, Path]:
    """
    Executes the complete evaluation stage.

    Returns:
        The evaluation result and the path of the saved summary report.
    """
    # --- 1) Inference & Metrics ---
    result = evaluate_model(model, test)

    (reporter or Reporter()).log_evaluation_tables(
        logger=logger,
        confusion=result.confusion,
        metrics=result.metrics,
    )

    # --- 2) Visualizations ---
    if cfg.evaluation.save_plots:
        plot_confusion_matrix(
            confusion=result.confusion,
            out_path=paths.figures / "confusion_matrix.png",
            cfg=cfg.evaluation,
            title=f"Confusion Matrix ({cfg.model.name})",
        )

    # --- 3) Structured Reporting ---
    save_evaluation_tables(result, paths.reports)
    report = create_evaluation_report(
        result=result,
        split_summary=split_summary,
        cfg=cfg,
        log_path=paths.log_path,
    )
    report_path = report.save(paths.report_path(cfg.evaluation.report_format))

    logger.info(
        f"Evaluation finished. Acc {result.accuracy:.4f} | "
        f"Sens {result.metric('sensitivity'):.4f} | PPV {result.metric('ppv'):.4f}"
    )
    return result, report_path
