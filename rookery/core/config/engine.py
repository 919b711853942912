"""
Configuration Engine.

Aggregates the sub-schemas (dataset, split, model, evaluation, telemetry) into
the single immutable `Config` manifest that every pipeline stage receives.
Supports two hydration paths: CLI arguments (`from_args`) and YAML recipes
(`from_yaml`); when `--config` is given the YAML document takes precedence
over command-line values.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse
from pathlib import Path

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, model_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from ..io import load_config_from_yaml
from .dataset_config import DatasetConfig
from .evaluation_config import EvaluationConfig
from .model_config import ModelConfig
from .split_config import SplitConfig
from .telemetry_config import TelemetryConfig

# =========================================================================== #
#                               ROOT MANIFEST                                 #
# =========================================================================== #

class Config(BaseModel):
    """
    Immutable experiment manifest.

    Cross-validates the sub-configurations: the label named on the left of
    the model formula must be the dataset's label column.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    split: SplitConfig = Field(default_factory=SplitConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @model_validator(mode="after")
    def validate_formula_label(self) -> "Config":
        formula_label = self.model.formula.partition("~")[0].strip()
        if formula_label != self.dataset.label_column:
            raise ValueError(
                f"Formula label '{formula_label}' does not match "
                f"dataset label column '{self.dataset.label_column}'"
            )
        return self

    @property
    def model_name(self) -> str:
        return self.model.name

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """
        Builds the manifest from parsed CLI arguments.

        If `args.config` points to a YAML recipe, the recipe is loaded instead
        and the CLI values are ignored (except `data_path`, which fills the
        recipe's dataset section when the recipe does not name a file).
        """
        config_path = getattr(args, "config", None)
        if config_path:
            return cls.from_yaml(Path(config_path), data_path=getattr(args, "data_path", None))

        return cls(
            dataset=DatasetConfig.from_args(args),
            split=SplitConfig.from_args(args),
            model=ModelConfig.from_args(args),
            evaluation=EvaluationConfig.from_args(args),
            telemetry=TelemetryConfig.from_args(args),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path, data_path: str | Path | None = None) -> "Config":
        """
        Hydrates the manifest from a YAML recipe.

        Args:
            yaml_path: Recipe with optional `dataset`, `split`, `model`,
                `evaluation` and `telemetry` sections.
            data_path: Fallback input file when the recipe omits one.
        """
        raw = load_config_from_yaml(yaml_path)
        dataset_section = dict(raw.get("dataset") or {})
        if data_path is not None and not dataset_section.get("data_path"):
            dataset_section["data_path"] = data_path
        raw["dataset"] = dataset_section
        return cls.model_validate(raw)
