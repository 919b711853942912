"""
Test Suite for Run Workspace Paths and the Error Taxonomy.
"""

from datetime import datetime

import pytest

from rookery.core import (
    DataQualityError,
    EvaluationFailureError,
    InvalidArgumentError,
    RookeryError,
    RunPaths,
    TrainingFailureError,
)


@pytest.mark.unit
def test_run_paths_layout(tmp_path):
    stamp = datetime(2024, 5, 1, 9, 30, 0)

    paths = RunPaths.create("Palmer Penguins", "random_forest", base_dir=tmp_path, timestamp=stamp)

    assert paths.run_id == "20240501_093000_palmer_penguins_random_forest"
    assert paths.root == tmp_path / paths.run_id
    assert paths.log_path == paths.logs / "run.log"
    assert paths.get_config_path() == paths.root / "config.yaml"
    assert paths.report_path("xlsx").name == "evaluation_summary.xlsx"
    assert all(d.is_dir() for d in (paths.figures, paths.reports, paths.logs))


@pytest.mark.unit
def test_run_paths_immutable(tmp_path):
    paths = RunPaths.create("penguins", "rf", base_dir=tmp_path)

    with pytest.raises(AttributeError):
        paths.root = tmp_path


@pytest.mark.unit
@pytest.mark.parametrize(
    "error, stage",
    [
        (InvalidArgumentError("x"), "arguments"),
        (DataQualityError("x"), "loader"),
        (TrainingFailureError("x"), "trainer"),
        (EvaluationFailureError("x"), "evaluator"),
    ],
)
def test_error_stages(error, stage):
    assert isinstance(error, RookeryError)
    assert error.stage == stage
    assert str(error) == f"[{stage}] x"


@pytest.mark.unit
def test_stage_override_and_value_error_compat():
    error = InvalidArgumentError("bad", stage="splitter")

    assert error.stage == "splitter"
    assert isinstance(error, ValueError)


@pytest.mark.unit
def test_data_quality_counts():
    error = DataQualityError("2 row(s) contain missing values", {"bill_length_mm": 2})

    assert error.missing_counts == {"bill_length_mm": 2}


@pytest.mark.unit
def test_run_paths_same_second_get_distinct_roots(tmp_path):
    stamp = datetime(2026, 1, 1, 12, 0, 0)

    first = RunPaths.create("penguins", "random_forest", base_dir=tmp_path, timestamp=stamp)
    second = RunPaths.create("penguins", "random_forest", base_dir=tmp_path, timestamp=stamp)
    third = RunPaths.create("penguins", "random_forest", base_dir=tmp_path, timestamp=stamp)

    assert len({first.root, second.root, third.root}) == 3
    assert second.run_id == f"{first.run_id}_1"
    assert third.run_id == f"{first.run_id}_2"
    assert all(p.logs.is_dir() for p in (first, second, third))
