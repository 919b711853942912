"""
Telemetry & Run Reporting Engine.

This module provides the `Reporter` class, a formatting utility for emitting
run metadata and results. It keeps the visual representation of the pipeline
state out of the orchestration and evaluation logic.

The reporter handles:
    - Dataset and schema reporting.
    - Split and model strategy summaries.
    - Filesystem workspace mapping.
    - Confusion matrix and metrics table rendering.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import TYPE_CHECKING

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd
from pydantic import BaseModel, ConfigDict

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..paths import LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:
    from ..config import Config
    from ..paths import RunPaths

# =========================================================================== #
#                             REPORTER DEFINITION                             #
# =========================================================================== #

class Reporter(BaseModel):
    """
    Centralized logging utility for run lifecycle events.

    Called by the orchestrator at start-up for the baseline report, and by the
    evaluation pipeline to print the confusion matrix and metrics tables.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    def log_initial_status(
        self,
        logger: logging.Logger,
        cfg: "Config",
        paths: "RunPaths",
    ) -> None:
        """
        Logs the resolved configuration upon initialization.

        Args:
            logger: The active run logger.
            cfg: The validated global configuration manifest.
            paths: The directory container for the current run.
        """
        logger.info(LogStyle.header("Pipeline Initialization"))

        self._log_dataset_section(logger, cfg)
        logger.info("")

        self._log_strategy_section(logger, cfg)
        logger.info("")

        logger.info("[FILESYSTEM]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Run Root:     {paths.root}")

    def _log_dataset_section(self, logger, cfg):
        """Logs input file and column roles."""
        ds = cfg.dataset

        logger.info("[DATASET]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Source:       {ds.data_path}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Label:        {ds.label_column}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Numeric:      {', '.join(ds.numeric_columns)}")
        if ds.categorical_columns:
            logger.info(
                f"{LogStyle.INDENT}{LogStyle.ARROW} Categorical:  {', '.join(ds.categorical_columns)}"
            )
        if ds.drop_missing:
            logger.warning(f"{LogStyle.INDENT}{LogStyle.WARNING} Incomplete rows will be dropped.")

    def _log_strategy_section(self, logger, cfg):
        """Logs split and classifier settings."""
        split, model = cfg.split, cfg.model

        logger.info("[SPLIT]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Proportion:   {split.proportion:.2f} train")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Seed:         {split.seed}")

        logger.info("[MODEL]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Classifier:   {model.name}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Formula:      {model.formula}")
        if model.name == "random_forest":
            logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Trees:        {model.n_estimators}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Seed:         {model.seed}")

    def log_evaluation_tables(
        self,
        logger: logging.Logger,
        confusion: pd.DataFrame,
        metrics: pd.DataFrame,
    ) -> None:
        """
        Renders the confusion matrix and metrics table as text blocks.

        Args:
            logger: The active run logger.
            confusion: Truth x prediction count table.
            metrics: Long metrics table (`.metric`, `.estimator`, `class`, `.estimate`).
        """
        logger.info(LogStyle.LIGHT)
        logger.info("[CONFUSION MATRIX] rows = truth, columns = prediction")
        for line in confusion.to_string().splitlines():
            logger.info(f"{LogStyle.INDENT}{line}")

        logger.info("[METRICS]")
        printable = metrics.fillna({"class": "-"})
        for line in printable.to_string(index=False, float_format=lambda v: f"{v:.4f}").splitlines():
            logger.info(f"{LogStyle.INDENT}{line}")
        logger.info(LogStyle.LIGHT)


def log_pipeline_summary(
    test_acc: float,
    run_dir: Path,
    duration: str,
    report_path: Path | None = None,
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Logs the closing banner of a pipeline run.

    Args:
        test_acc: Accuracy on the testing subset.
        run_dir: Root directory of the run.
        duration: Human-readable elapsed time.
        report_path: Saved evaluation summary, if any.
        logger_instance: Logger to use; defaults to the project logger.
    """
    log = logger_instance or logging.getLogger(LOGGER_NAME)

    log.info(LogStyle.DOUBLE)
    log.info(f"{LogStyle.SUCCESS} PIPELINE COMPLETED")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Test Accuracy: {test_acc:.4f}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Duration:      {duration}")
    if report_path is not None:
        log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Report:        {report_path}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Run Directory: {run_dir}")
    log.info(LogStyle.DOUBLE)
