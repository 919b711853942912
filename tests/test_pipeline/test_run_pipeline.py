"""
Test Suite for Pipeline Phases and the Entry Point.

End-to-end runs on the synthetic penguin table, written into temporary
output directories.
"""

import json
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from main import main
from rookery.core import (
    Config,
    DataQualityError,
    InvalidArgumentError,
    RootOrchestrator,
    TrainingFailureError,
)
from rookery.evaluation import PRED_COLUMN
from rookery.pipeline import PipelineResult, run_exploration_phase, run_training_phase


def _run(cfg):
    with RootOrchestrator(cfg) as orchestrator:
        return orchestrator, run_training_phase(orchestrator)


# TRAINING PHASE
@pytest.mark.integration
def test_full_run_produces_artifacts(basic_args):
    basic_args.save_plots = True
    cfg = Config.from_args(basic_args)

    orchestrator, result = _run(cfg)

    assert isinstance(result, PipelineResult)
    assert result.split.n_train == 70
    assert result.split.n_test == 30
    assert result.evaluation.confusion.to_numpy().sum() == 30
    assert result.test_accuracy >= 0.9

    paths = orchestrator.paths
    assert result.report_path == paths.report_path("csv")
    assert result.report_path.exists()
    assert (paths.figures / "confusion_matrix.png").exists()
    assert (paths.figures / "feature_distributions.png").exists()
    assert (paths.reports / "metrics.csv").exists()
    assert paths.get_config_path().exists()
    assert paths.log_path.exists()


@pytest.mark.integration
def test_repeated_runs_are_identical(basic_args):
    cfg = Config.from_args(basic_args)

    first_orch, first = _run(cfg)
    second_orch, second = _run(cfg)

    assert first_orch.paths.root != second_orch.paths.root

    assert list(first.split.train.index) == list(second.split.train.index)
    pd.testing.assert_frame_equal(first.evaluation.predictions, second.evaluation.predictions)
    pd.testing.assert_frame_equal(first.evaluation.metrics, second.evaluation.metrics)


@pytest.mark.integration
def test_missing_data_path_rejected(basic_args):
    basic_args.data_path = None
    cfg = Config.from_args(basic_args)

    with pytest.raises(InvalidArgumentError, match="No input file"):
        _run(cfg)


@pytest.mark.integration
def test_missing_values_fail_loudly(basic_args, penguin_csv_with_na):
    basic_args.data_path = str(penguin_csv_with_na)
    cfg = Config.from_args(basic_args)

    with pytest.raises(DataQualityError) as excinfo:
        _run(cfg)

    assert excinfo.value.missing_counts["bill_length_mm"] == 1
    assert excinfo.value.missing_counts["island"] == 1


@pytest.mark.integration
def test_missing_values_dropped_on_request(basic_args, penguin_csv_with_na):
    basic_args.data_path = str(penguin_csv_with_na)
    basic_args.drop_missing = True
    cfg = Config.from_args(basic_args)

    _, result = _run(cfg)

    assert len(result.observations) == 98
    assert result.split.n_train == 69


@pytest.mark.integration
def test_training_failure_propagates(basic_args):
    cfg = Config.from_args(basic_args)

    with patch(
        "rookery.pipeline.phases.fit_model",
        side_effect=TrainingFailureError("degenerate training subset"),
    ):
        with pytest.raises(TrainingFailureError, match="degenerate"):
            _run(cfg)


@pytest.mark.unit
def test_exploration_phase_without_figures(penguin_table, basic_args):
    cfg = Config.from_args(basic_args)

    summary = run_exploration_phase(penguin_table, cfg)

    assert list(summary.index) == ["Adelie", "Chinstrap", "Gentoo"]
    assert summary["n"].sum() == 100


# ENTRY POINT
@pytest.mark.integration
def test_main_end_to_end(penguin_csv, tmp_path):
    out = tmp_path / "runs"

    main([
        "--data_path", str(penguin_csv),
        "--output_dir", str(out),
        "--report_format", "json",
        "--n_estimators", "20",
        "--no_plots",
    ])

    runs = list(out.iterdir())
    assert len(runs) == 1
    summary = json.loads((runs[0] / "reports" / "evaluation_summary.json").read_text())
    assert summary["n_train"] == 70
    assert summary["split_seed"] == 2056
    predictions = pd.read_csv(runs[0] / "reports" / "predictions.csv")
    assert PRED_COLUMN in predictions.columns


@pytest.mark.integration
def test_main_with_yaml_recipe(temp_yaml_config, tmp_path):
    main(["--config", str(temp_yaml_config)])

    runs = list((tmp_path / "yaml_outputs").iterdir())
    assert len(runs) == 1
    assert "logistic_regression" in runs[0].name
    summary = json.loads((runs[0] / "reports" / "evaluation_summary.json").read_text())
    assert summary["n_train"] == 80
    assert summary["model"] == "logistic_regression"


@pytest.mark.unit
def test_exploration_phase_logs_feature_profile(penguin_table, basic_args):
    cfg = Config.from_args(basic_args)

    with patch("rookery.pipeline.phases.log_feature_profile") as log_profile:
        run_exploration_phase(penguin_table, cfg)

    profile = log_profile.call_args.args[0]
    assert list(profile.columns) == list(cfg.dataset.numeric_columns)
    assert profile.loc["count", "bill_length_mm"] == 100


@pytest.mark.unit
def test_training_phase_falls_back_to_project_logger(basic_args):
    basic_args.data_path = None
    orchestrator = MagicMock()
    orchestrator.cfg = Config.from_args(basic_args)
    orchestrator.run_logger = None

    with patch("rookery.pipeline.phases.logging.getLogger") as get_logger:
        with pytest.raises(InvalidArgumentError):
            run_training_phase(orchestrator)

    get_logger.assert_called_once_with("rookery")
