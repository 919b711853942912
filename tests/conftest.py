"""Pytest fixtures for Rookery tests."""
import argparse

import numpy as np
import pandas as pd
import pytest

from rookery.core import DatasetConfig

# Per-species centers: bill length, bill depth, flipper length, body mass
_CENTERS = {
    "Adelie": (38.8, 18.3, 190.0, 3700.0, "Torgersen"),
    "Chinstrap": (48.8, 18.4, 196.0, 3730.0, "Dream"),
    "Gentoo": (47.5, 15.0, 217.0, 5080.0, "Biscoe"),
}


def make_penguins(n_rows: int = 100, seed: int = 0) -> pd.DataFrame:
    """Synthetic, well-separated penguin measurements (balanced classes)."""
    rng = np.random.default_rng(seed)
    species = [list(_CENTERS)[i % 3] for i in range(n_rows)]
    rows = []
    for sp in species:
        bill_len, bill_dep, flipper, mass, island = _CENTERS[sp]
        rows.append({
            "species": sp,
            "island": island,
            "bill_length_mm": round(bill_len + rng.normal(0, 0.8), 1),
            "bill_depth_mm": round(bill_dep + rng.normal(0, 0.3), 1),
            "flipper_length_mm": round(flipper + rng.normal(0, 2.0)),
            "body_mass_g": round(mass + rng.normal(0, 60.0)),
            "sex": "male" if rng.random() > 0.5 else "female",
            "year": 2007 + int(rng.integers(0, 3)),
        })
    return pd.DataFrame(rows)


@pytest.fixture
def raw_penguins():
    """Raw frame as it would come out of the CSV (100 rows, extra columns)."""
    return make_penguins()


@pytest.fixture
def dataset_cfg():
    """Default penguin schema."""
    return DatasetConfig()


@pytest.fixture
def penguin_table(raw_penguins, dataset_cfg):
    """Validated observation table."""
    from rookery.data_handler import prepare_observations
    return prepare_observations(raw_penguins, dataset_cfg)


@pytest.fixture
def penguin_csv(tmp_path, raw_penguins):
    """CSV file with the raw penguin frame."""
    path = tmp_path / "penguins.csv"
    raw_penguins.to_csv(path, index=False)
    return path


@pytest.fixture
def penguin_csv_with_na(tmp_path, raw_penguins):
    """CSV file with two incomplete rows, written as 'NA' like the R export."""
    frame = raw_penguins.astype({"bill_length_mm": object, "island": object})
    frame.loc[3, "bill_length_mm"] = "NA"
    frame.loc[7, "island"] = "NA"
    path = tmp_path / "penguins_na.csv"
    frame.to_csv(path, index=False)
    return path


@pytest.fixture
def basic_args(tmp_path, penguin_csv):
    """Basic argparse namespace for testing."""
    return argparse.Namespace(
        config=None,

        # Dataset
        data_path=str(penguin_csv),
        label_column="species",
        feature_columns=None,
        categorical_columns=None,
        drop_missing=False,

        # Split
        proportion=0.70,
        split_seed=2056,

        # Model
        model_name="random_forest",
        formula="species ~ .",
        n_estimators=25,
        max_depth=None,
        max_iter=1000,
        model_seed=2056,

        # Evaluation
        report_format="csv",
        fig_dpi=80,
        cmap_confusion="Blues",
        plot_style="default",
        save_plots=False,

        # Paths
        output_dir=str(tmp_path / "outputs"),
        log_level="INFO",
        project_name="rookery",
    )


@pytest.fixture
def temp_yaml_config(tmp_path, penguin_csv):
    """Temporary YAML config file."""
    yaml_content = f"""
dataset:
  data_path: {penguin_csv}
  label_column: species

split:
  proportion: 0.8
  seed: 7

model:
  name: logistic_regression
  formula: "species ~ bill_length_mm + bill_depth_mm"
  seed: 11

evaluation:
  report_format: json
  save_plots: false

telemetry:
  output_dir: {tmp_path / "yaml_outputs"}
"""
    yaml_file = tmp_path / "test_config.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file


@pytest.fixture
def temp_invalid_yaml(tmp_path):
    """Invalid YAML config (proportion outside the open interval)."""
    yaml_content = """
split:
  proportion: 1.0
"""
    yaml_file = tmp_path / "invalid.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file
