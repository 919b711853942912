"""
Train/Test Splitter.

Partitions an observation table into disjoint training and testing subsets.
The training subset holds `round(p * n)` rows (halves round up) chosen by a
seeded permutation; the rest form the testing subset. Both subsets keep the
original row order and index labels, so their union recovers the table.

The split is not stratified: class balance in the testing subset is not
guaranteed.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import math
from dataclasses import dataclass

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import pandas as pd

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, InvalidArgumentError

logger = logging.getLogger(LOGGER_NAME)

# =========================================================================== #
#                                SPLIT RESULT                                 #
# =========================================================================== #

@dataclass(frozen=True)
class DataSplit:
    """
    Immutable result of a train/test partition.

    Attributes:
        train: Training rows.
        test: Testing rows.
        proportion: Requested training fraction.
        seed: Permutation seed.
    """
    train: pd.DataFrame
    test: pd.DataFrame
    proportion: float
    seed: int

    @property
    def n_train(self) -> int:
        return len(self.train)

    @property
    def n_test(self) -> int:
        return len(self.test)

    def summary(self) -> dict:
        """Row counts for logging and reporting."""
        return {
            "n_total": self.n_train + self.n_test,
            "n_train": self.n_train,
            "n_test": self.n_test,
            "proportion": self.proportion,
            "seed": self.seed,
        }

# =========================================================================== #
#                                 SPLITTING                                   #
# =========================================================================== #

def training_size(n_rows: int, proportion: float) -> int:
    """Number of training rows: `p * n` rounded half up."""
    return int(math.floor(proportion * n_rows + 0.5))


def split_observations(
    table: pd.DataFrame,
    proportion: float = 0.70,
    seed: int = 2056,
) -> DataSplit:
    """
    Deterministically splits the table into training and testing subsets.

    Args:
        table: Validated observation table.
        proportion: Training fraction, strictly between 0 and 1.
        seed: Seed of the row permutation.

    Returns:
        DataSplit with both subsets.

    Raises:
        InvalidArgumentError: If `proportion` is outside (0, 1) or the table
            is empty.
    """
    if not 0.0 < proportion < 1.0:
        raise InvalidArgumentError(
            f"Split proportion must be in (0, 1), got {proportion}", stage="splitter"
        )
    if table is None or len(table) == 0:
        raise InvalidArgumentError("Cannot split an empty table.", stage="splitter")

    n_rows = len(table)
    n_train = training_size(n_rows, proportion)

    rng = np.random.default_rng(seed)
    chosen = rng.permutation(n_rows)[:n_train]

    mask = np.zeros(n_rows, dtype=bool)
    mask[chosen] = True

    split = DataSplit(
        train=table.iloc[mask].copy(),
        test=table.iloc[~mask].copy(),
        proportion=proportion,
        seed=seed,
    )
    logger.info(
        f"Split {n_rows} rows (p={proportion:.2f}, seed={seed}) → "
        f"Train:[{split.n_train}] Test:[{split.n_test}]"
    )
    return split
