"""
Reporting & Run Summarization Module

This module turns the evaluation outputs and the configuration state into
persistent artifacts once the pipeline completes.

Core Components:
    * EvaluationReport: A frozen data container aggregating run metadata,
      split sizes and headline metrics.
    * Export: xlsx (formatted with xlsxwriter), csv or json summaries, plus
      CSV dumps of the prediction, confusion matrix and metrics tables.
"""

# =========================================================================== #
#                                Standard Imports
# =========================================================================== #
import json
import logging
import math
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict

# =========================================================================== #
#                                Third-Party Imports
# =========================================================================== #
import pandas as pd

# =========================================================================== #
#                                Internal Imports
# =========================================================================== #
from rookery.core import LOGGER_NAME, Config
from .engine import EvaluationResult


# =========================================================================== #
#                               SUMMARY REPORTS
# =========================================================================== #

logger = logging.getLogger(LOGGER_NAME)


def _json_safe(value):
    """NaN and infinities become None so that the JSON stays strict."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class EvaluationReport:
    """
    Structured data container summarizing a complete pipeline run.

    Provides a vertical DataFrame representation optimized for readability
    in spreadsheet software.
    """
    timestamp: str
    dataset: str
    model: str
    formula: str
    n_total: int
    n_train: int
    n_test: int
    split_proportion: float
    split_seed: int
    model_seed: int
    test_accuracy: float
    macro_sensitivity: float
    macro_ppv: float
    log_path: str

    def to_vertical_df(self) -> pd.DataFrame:
        """Converts the report dataclass into a vertical pandas DataFrame."""
        data = asdict(self)
        return pd.DataFrame(list(data.items()), columns=["Parameter", "Value"])

    def save(self, path: Path) -> Path:
        """
        Saves the report in the format implied by the file suffix.

        Raises:
            ValueError: On an unsupported suffix.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        suffix = path.suffix.lower().lstrip(".")

        if suffix == "xlsx":
            self._save_excel(path)
        elif suffix == "csv":
            self.to_vertical_df().to_csv(path, index=False)
        elif suffix == "json":
            payload = {k: _json_safe(v) for k, v in asdict(self).items()}
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        else:
            raise ValueError(f"Unsupported report format: '{path.suffix}'")

        logger.info(f"Evaluation summary saved → {path}")
        return path

    def _save_excel(self, path: Path) -> None:
        """Writes the vertical table with header styling and wrapped values."""
        df = self.to_vertical_df()

        with pd.ExcelWriter(path, engine='xlsxwriter') as writer:
            df.to_excel(writer, sheet_name='Evaluation Summary', index=False)

            workbook = writer.book
            worksheet = writer.sheets['Evaluation Summary']

            header_format = workbook.add_format({
                'bold': True, 'bg_color': '#D7E4BC', 'border': 1, 'align': 'center'
            })
            base_format = workbook.add_format({
                'border': 1, 'align': 'left', 'valign': 'vcenter'
            })
            wrap_format = workbook.add_format({
                'border': 1, 'text_wrap': True, 'valign': 'top', 'font_size': 10
            })

            worksheet.set_column('A:A', 22, base_format)
            worksheet.set_column('B:B', 60, wrap_format)

            for col_num, value in enumerate(df.columns.values):
                worksheet.write(0, col_num, value, header_format)


def create_evaluation_report(
    result: EvaluationResult,
    split_summary: Dict[str, float],
    cfg: Config,
    log_path: Path,
) -> EvaluationReport:
    """
    Constructs an EvaluationReport from the evaluation result and config.

    Args:
        result: Evaluation outputs.
        split_summary: `DataSplit.summary()` counts.
        cfg: Resolved configuration.
        log_path: Path of the run log.
    """
    return EvaluationReport(
        timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        dataset=cfg.dataset.dataset_name,
        model=cfg.model.name,
        formula=cfg.model.formula,
        n_total=int(split_summary["n_total"]),
        n_train=int(split_summary["n_train"]),
        n_test=int(split_summary["n_test"]),
        split_proportion=cfg.split.proportion,
        split_seed=cfg.split.seed,
        model_seed=cfg.model.seed,
        test_accuracy=result.accuracy,
        macro_sensitivity=result.metric("sensitivity"),
        macro_ppv=result.metric("ppv"),
        log_path=str(log_path),
    )


def save_evaluation_tables(result: EvaluationResult, out_dir: Path) -> Dict[str, Path]:
    """
    Dumps predictions, confusion matrix and metrics as CSV files.

    Returns:
        Mapping of table name to written path.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = {
        "predictions": out_dir / "predictions.csv",
        "confusion_matrix": out_dir / "confusion_matrix.csv",
        "metrics": out_dir / "metrics.csv",
    }
    result.augmented.to_csv(paths["predictions"], index=True, index_label="row")
    result.confusion.to_csv(paths["confusion_matrix"])
    result.metrics.to_csv(paths["metrics"], index=False)
    logger.debug(f"Evaluation tables written to {out_dir}")
    return paths
