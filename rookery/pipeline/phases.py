"""
Pipeline Phases.

Sequences the stages of a run inside an initialized `RootOrchestrator`:
load → explore → split → train → evaluate → report. Each stage receives
explicit table values and returns new ones; nothing is shared implicitly.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import pandas as pd

from rookery.core import LOGGER_NAME, Config, InvalidArgumentError, LogStyle
from rookery.data_handler import (
    DataSplit,
    describe_features,
    load_observations,
    log_class_summary,
    log_feature_profile,
    split_observations,
    summarize_observations,
)
from rookery.evaluation import (
    EvaluationResult,
    plot_feature_distributions,
    run_final_evaluation,
)
from rookery.trainer import FittedModel, fit_model

if TYPE_CHECKING:
    from rookery.core import RootOrchestrator


@dataclass(frozen=True)
class PipelineResult:
    """Everything a run produced, held in memory."""
    observations: pd.DataFrame
    split: DataSplit
    model: FittedModel
    evaluation: EvaluationResult
    report_path: Path

    @property
    def test_accuracy(self) -> float:
        return self.evaluation.accuracy


def run_exploration_phase(
    table: pd.DataFrame,
    cfg: Config,
    figures_dir: Optional[Path] = None,
) -> pd.DataFrame:
    """
    Logs per-class summary statistics and, when enabled, saves box plots.

    Returns:
        The per-class summary table.
    """
    ds = cfg.dataset
    summary = summarize_observations(table, ds.label_column, ds.numeric_columns)
    log_class_summary(summary)
    if ds.numeric_columns:
        log_feature_profile(describe_features(table, ds.numeric_columns))

    if cfg.evaluation.save_plots and figures_dir is not None and ds.numeric_columns:
        plot_feature_distributions(
            table=table,
            label_column=ds.label_column,
            numeric_columns=ds.numeric_columns,
            out_path=figures_dir / "feature_distributions.png",
            cfg=cfg.evaluation,
        )
    return summary


def run_training_phase(
    orchestrator: "RootOrchestrator",
    cfg: Optional[Config] = None,
) -> PipelineResult:
    """
    Runs the full classification workflow.

    Args:
        orchestrator: Initialized orchestrator providing paths and logger.
        cfg: Configuration override; defaults to the orchestrator's.

    Returns:
        PipelineResult with every intermediate table.

    Raises:
        InvalidArgumentError: If no input file is configured.
        RookeryError: Any stage failure, propagated unchanged.
    """
    cfg = cfg or orchestrator.cfg
    paths = orchestrator.paths
    run_logger = orchestrator.run_logger or logging.getLogger(LOGGER_NAME)

    if cfg.dataset.data_path is None:
        raise InvalidArgumentError("No input file configured (use --data_path).", stage="loader")

    # 1. Load
    run_logger.info(f" {LogStyle.BULLET} Loading observations ".center(60, "="))
    observations = load_observations(cfg.dataset.data_path, cfg.dataset)

    # 2. Explore
    run_exploration_phase(observations, cfg, figures_dir=paths.figures)

    # 3. Split
    run_logger.info(f" {LogStyle.BULLET} Splitting ".center(60, "="))
    split = split_observations(
        observations,
        proportion=cfg.split.proportion,
        seed=cfg.split.seed,
    )

    # 4. Train
    run_logger.info(f" {LogStyle.BULLET} Training ".center(60, "="))
    model = fit_model(split.train, cfg.model)

    # 5. Evaluate & report
    run_logger.info(f" {LogStyle.BULLET} Evaluating ".center(60, "="))
    evaluation, report_path = run_final_evaluation(
        model=model,
        test=split.test,
        split_summary=split.summary(),
        paths=paths,
        cfg=cfg,
        reporter=orchestrator.reporter,
    )

    return PipelineResult(
        observations=observations,
        split=split,
        model=model,
        evaluation=evaluation,
        report_path=report_path,
    )
