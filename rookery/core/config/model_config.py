"""
Classifier Configuration Schema.

Selects the external classification algorithm from the model registry and
holds its hyperparameters. Algorithm-internal randomness (bootstrap sampling,
feature subsampling, solver initialisation) is driven by `seed`.
"""

import argparse
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import ModelName, NonNegativeInt, PositiveInt


# MODEL CONFIGURATION
class ModelConfig(BaseModel):
    """
    Attributes:
        name: Registry identifier of the classifier.
        formula: Model formula, `label ~ .` or `label ~ a + b`.
        n_estimators: Number of trees (random forest only).
        max_depth: Maximum tree depth, unlimited when None.
        max_iter: Solver iterations (logistic regression only).
        seed: Seed for the algorithm's internal randomness.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: ModelName = Field(default="random_forest", description="Classifier identifier")
    formula: str = Field(default="species ~ .", description="Label ~ features")
    n_estimators: PositiveInt = Field(default=100, description="Trees in the forest")
    max_depth: Optional[PositiveInt] = Field(default=None, description="Tree depth cap")
    max_iter: PositiveInt = Field(default=1000, description="Logistic solver iterations")
    seed: NonNegativeInt = Field(default=2056, description="Algorithm seed")

    @field_validator("formula")
    @classmethod
    def validate_formula(cls, v: str) -> str:
        """Only checks shape; column resolution happens against the data."""
        lhs, sep, rhs = v.partition("~")
        if not sep or not lhs.strip() or not rhs.strip():
            raise ValueError(f"Formula must look like 'label ~ .', got '{v}'")
        return v.strip()

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ModelConfig":
        """Factory from CLI arguments (`--model_name`, `--model_seed`, ...)."""
        mapping = {
            "model_name": "name",
            "formula": "formula",
            "n_estimators": "n_estimators",
            "max_depth": "max_depth",
            "max_iter": "max_iter",
            "model_seed": "seed",
        }
        params = {
            field: getattr(args, arg)
            for arg, field in mapping.items()
            if getattr(args, arg, None) is not None
        }
        return cls(**params)
