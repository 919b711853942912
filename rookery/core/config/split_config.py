"""
Train/Test Partition Configuration.

The proportion is constrained to the open interval (0, 1) and the seed is an
explicit value rather than global process state.
"""

import argparse

from pydantic import BaseModel, ConfigDict, Field

from .types import NonNegativeInt, Proportion


# SPLIT CONFIGURATION
class SplitConfig(BaseModel):
    """
    Attributes:
        proportion: Fraction of rows allocated to the training subset.
        seed: Seed of the permutation that selects training rows.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    proportion: Proportion = Field(default=0.70, description="Training fraction")
    seed: NonNegativeInt = Field(default=2056, description="Split seed")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SplitConfig":
        """
        Factory from CLI arguments (`--proportion`, `--split_seed`).

        Args:
            args: Parsed command-line arguments

        Returns:
            SplitConfig with CLI-overridden values
        """
        params = {}
        if getattr(args, "proportion", None) is not None:
            params["proportion"] = args.proportion
        if getattr(args, "split_seed", None) is not None:
            params["seed"] = args.split_seed
        return cls(**params)
