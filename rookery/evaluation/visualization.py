"""
Visualization Utilities Module

This module renders the pipeline's figures: box plots of every numeric
feature grouped by class (exploration step) and a heatmap of the confusion
matrix (evaluation step). Styling is driven by the evaluation configuration.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import matplotlib
matplotlib.use("Agg")  # Use non-interactive backend for headless environments
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from sklearn.metrics import ConfusionMatrixDisplay

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from rookery.core import LOGGER_NAME, EvaluationConfig

# Global logger instance
logger = logging.getLogger(LOGGER_NAME)


# =========================================================================== #
#                               VISUALIZATION FUNCTIONS                       #
# =========================================================================== #

def plot_feature_distributions(
        table: pd.DataFrame,
        label_column: str,
        numeric_columns: Sequence[str],
        out_path: Path,
        cfg: EvaluationConfig,
) -> None:
    """
    Draws one box plot per numeric feature, grouped by class.

    Args:
        table (pd.DataFrame): Observation table.
        label_column (str): Grouping column.
        numeric_columns (Sequence[str]): Features to plot.
        out_path (Path): Destination file path.
        cfg (EvaluationConfig): DPI and style settings.
    """
    columns = list(numeric_columns)
    n_cols = min(2, len(columns)) or 1
    n_rows = int(np.ceil(len(columns) / n_cols)) or 1

    with plt.style.context(cfg.plot_style):
        fig, axes = plt.subplots(n_rows, n_cols, figsize=(6 * n_cols, 4 * n_rows), squeeze=False)
        classes = list(table[label_column].cat.categories) \
            if isinstance(table[label_column].dtype, pd.CategoricalDtype) \
            else sorted(table[label_column].unique())

        for ax, col in zip(axes.flat, columns):
            groups = [table.loc[table[label_column] == cls, col].to_numpy() for cls in classes]
            ax.boxplot(groups)
            ax.set_xticks(range(1, len(classes) + 1))
            ax.set_xticklabels([str(c) for c in classes])
            ax.set_title(col)
            ax.grid(True, linestyle='--', alpha=0.4)

        for ax in list(axes.flat)[len(columns):]:
            ax.axis("off")

        fig.suptitle(f"Feature distributions by {label_column}", fontsize=14)
        fig.tight_layout()

        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=cfg.fig_dpi, bbox_inches="tight")
        plt.close(fig)
    logger.info(f"Feature box plots saved → {out_path.name}")


def plot_confusion_matrix(
        confusion: pd.DataFrame,
        out_path: Path,
        cfg: EvaluationConfig,
        title: str = "Confusion Matrix",
) -> None:
    """
    Renders the confusion matrix counts as a heatmap.

    Args:
        confusion (pd.DataFrame): Truth x prediction counts.
        out_path (Path): Destination file path.
        cfg (EvaluationConfig): Colormap and DPI settings.
        title (str): Figure title.
    """
    disp = ConfusionMatrixDisplay(
        confusion_matrix=confusion.to_numpy(),
        display_labels=[str(c) for c in confusion.index],
    )

    with plt.style.context(cfg.plot_style):
        fig, ax = plt.subplots(figsize=(7, 6))
        disp.plot(
            ax=ax,
            cmap=cfg.cmap_confusion,
            xticks_rotation=45,
            values_format='d',
            colorbar=True,
        )
        ax.set_xlabel("Prediction")
        ax.set_ylabel("Truth")
        plt.title(title, fontsize=14, pad=20)
        plt.tight_layout()

        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=cfg.fig_dpi, bbox_inches="tight")
        plt.close(fig)
    logger.info(f"Confusion matrix saved → {out_path.name}")
