"""
Test Suite for Config Engine.

Tests main Config class integration, cross-validation,
YAML hydration, and from_args factory.
"""
# =========================================================================== #
#                         Standard Imports                                    #
# =========================================================================== #
import argparse
from pathlib import Path

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import pytest
from pydantic import ValidationError

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from rookery.core import (
    Config,
    DatasetConfig,
    EvaluationConfig,
    ModelConfig,
    SplitConfig,
    TelemetryConfig,
)
from rookery.core.paths import PROJECT_ROOT

# =========================================================================== #
#                    CONFIG: BASIC CONSTRUCTION                               #
# =========================================================================== #

@pytest.mark.unit
def test_config_defaults():
    """Defaults reproduce the reference analysis."""
    config = Config()

    assert config.split.proportion == 0.70
    assert config.split.seed == 2056
    assert config.model.name == "random_forest"
    assert config.model.formula == "species ~ ."
    assert config.dataset.label_column == "species"
    assert config.dataset.data_path is None
    assert config.dataset.drop_missing is False


@pytest.mark.unit
def test_config_from_args_basic(basic_args, penguin_csv):
    """Test Config.from_args() with basic arguments."""
    config = Config.from_args(basic_args)

    assert config.dataset.data_path == Path(penguin_csv).resolve()
    assert config.dataset.dataset_name == "penguins"
    assert config.model.n_estimators == 25
    assert config.evaluation.report_format == "csv"
    assert config.evaluation.save_plots is False


@pytest.mark.unit
def test_config_is_frozen():
    config = Config()

    with pytest.raises(ValidationError):
        config.split = SplitConfig(proportion=0.5)


@pytest.mark.unit
def test_extra_fields_rejected():
    with pytest.raises(ValidationError):
        Config.model_validate({"split": {"proportion": 0.7, "stratify": True}})

# =========================================================================== #
#                    CONFIG: CROSS-VALIDATION                                 #
# =========================================================================== #

@pytest.mark.unit
def test_formula_label_must_match_dataset_label():
    with pytest.raises(ValidationError, match="does not match"):
        Config(model=ModelConfig(formula="island ~ ."))


@pytest.mark.unit
@pytest.mark.parametrize("proportion", [0.0, 1.0, -0.2, 1.5])
def test_split_proportion_bounds(proportion):
    with pytest.raises(ValidationError):
        SplitConfig(proportion=proportion)


@pytest.mark.unit
def test_negative_seed_rejected():
    with pytest.raises(ValidationError):
        SplitConfig(seed=-1)


@pytest.mark.unit
@pytest.mark.parametrize("formula", ["species", "~ .", "species ~ ", ""])
def test_malformed_formula_rejected(formula):
    with pytest.raises(ValidationError, match="Formula"):
        ModelConfig(formula=formula)


@pytest.mark.unit
def test_label_cannot_be_feature():
    with pytest.raises(ValidationError, match="cannot also be a feature"):
        DatasetConfig(feature_columns=("species", "bill_length_mm"), categorical_columns=())


@pytest.mark.unit
def test_categoricals_must_be_features():
    with pytest.raises(ValidationError, match="not listed as features"):
        DatasetConfig(feature_columns=("bill_length_mm",), categorical_columns=("island",))


@pytest.mark.unit
def test_numeric_columns_exclude_categoricals():
    cfg = DatasetConfig()

    assert "island" not in cfg.numeric_columns
    assert cfg.required_columns[0] == "species"


@pytest.mark.unit
def test_unknown_model_name_rejected():
    with pytest.raises(ValidationError):
        ModelConfig(name="svm")


@pytest.mark.unit
def test_dpi_bounds():
    with pytest.raises(ValidationError):
        EvaluationConfig(fig_dpi=10)

# =========================================================================== #
#                    CONFIG: TELEMETRY                                        #
# =========================================================================== #

@pytest.mark.unit
def test_telemetry_absolute_output_dir(tmp_path):
    cfg = TelemetryConfig(output_dir=tmp_path / "runs", log_level="debug")

    assert cfg.output_dir == (tmp_path / "runs").resolve()
    assert cfg.output_dir.exists()
    assert cfg.log_level == "DEBUG"


@pytest.mark.unit
def test_telemetry_portable_dict(tmp_path):
    inside = TelemetryConfig(output_dir="outputs")
    outside = TelemetryConfig(output_dir=tmp_path)

    assert inside.to_portable_dict()["output_dir"] == "./outputs"
    assert outside.to_portable_dict()["output_dir"] == str(tmp_path.resolve())
    assert inside.output_dir == (PROJECT_ROOT / "outputs").resolve()

# =========================================================================== #
#                    CONFIG: YAML HYDRATION                                   #
# =========================================================================== #

@pytest.mark.unit
def test_from_yaml(temp_yaml_config):
    config = Config.from_yaml(temp_yaml_config)

    assert config.model.name == "logistic_regression"
    assert config.model.seed == 11
    assert config.split.proportion == 0.8
    assert config.split.seed == 7
    assert config.evaluation.report_format == "json"


@pytest.mark.unit
def test_yaml_takes_precedence_over_cli(temp_yaml_config, basic_args):
    basic_args.config = str(temp_yaml_config)

    config = Config.from_args(basic_args)

    assert config.model.name == "logistic_regression"
    assert config.evaluation.report_format == "json"


@pytest.mark.unit
def test_yaml_without_data_path_uses_cli_value(tmp_path, penguin_csv):
    recipe = tmp_path / "recipe.yaml"
    recipe.write_text("split:\n  seed: 3\n")
    args = argparse.Namespace(config=str(recipe), data_path=str(penguin_csv))

    config = Config.from_args(args)

    assert config.split.seed == 3
    assert config.dataset.data_path == Path(penguin_csv).resolve()


@pytest.mark.unit
def test_invalid_yaml_rejected(temp_invalid_yaml):
    with pytest.raises(ValidationError):
        Config.from_yaml(temp_invalid_yaml)


@pytest.mark.unit
def test_missing_yaml(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_non_mapping_yaml(tmp_path):
    recipe = tmp_path / "list.yaml"
    recipe.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="mapping"):
        Config.from_yaml(recipe)
