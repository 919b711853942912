"""
Filesystem Anchors & Run Workspace Management.

Defines the static project anchors (project root, default output root, logger
identity) and the `RunPaths` container that materialises a unique directory
tree for every pipeline execution.

Layout of a run directory::

    outputs/<YYYYMMDD_HHMMSS>_<dataset>_<model>/
        figures/    exploratory box plots, confusion matrix heatmap
        reports/    evaluation summary, confusion matrix and metrics tables
        logs/       run.log
        config.yaml resolved configuration manifest
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

# =========================================================================== #
#                                STATIC ANCHORS                               #
# =========================================================================== #

PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]
OUTPUTS_ROOT: Path = PROJECT_ROOT / "outputs"

LOGGER_NAME: str = "rookery"
LOG_FILENAME: str = "run.log"


def _slugify(value: str) -> str:
    """Lowercase, filesystem-safe identifier."""
    return re.sub(r"[^a-z0-9]+", "_", value.lower()).strip("_") or "run"


def setup_static_directories(base_dir: Path = OUTPUTS_ROOT) -> None:
    """Creates the top-level output directory if missing."""
    base_dir.mkdir(parents=True, exist_ok=True)


# =========================================================================== #
#                                 RUN PATHS                                   #
# =========================================================================== #

@dataclass(frozen=True)
class RunPaths:
    """
    Immutable container of the directories belonging to a single run.

    Attributes:
        run_id: Unique identifier (timestamp + dataset + model slug).
        root: Run root directory.
        figures: Plot destination.
        reports: Tabular report destination.
        logs: Log file destination.
    """
    run_id: str
    root: Path
    figures: Path
    reports: Path
    logs: Path

    @classmethod
    def create(
        cls,
        dataset_slug: str,
        model_name: str,
        base_dir: Path = OUTPUTS_ROOT,
        timestamp: datetime | None = None,
    ) -> "RunPaths":
        """
        Builds and materialises the directory tree for a new run.

        Args:
            dataset_slug: Dataset identifier (usually the CSV stem).
            model_name: Classifier identifier from the model registry.
            base_dir: Parent directory for all runs.
            timestamp: Fixed timestamp, mainly for tests.

        Returns:
            RunPaths with every directory already created. A numeric suffix
            is appended when a run with the same id already exists.
        """
        stamp = (timestamp or datetime.now()).strftime("%Y%m%d_%H%M%S")
        base_id = f"{stamp}_{_slugify(dataset_slug)}_{_slugify(model_name)}"
        Path(base_dir).mkdir(parents=True, exist_ok=True)

        run_id, attempt = base_id, 1
        while True:
            root = Path(base_dir) / run_id
            try:
                root.mkdir(exist_ok=False)
                break
            except FileExistsError:
                run_id = f"{base_id}_{attempt}"
                attempt += 1

        paths = cls(
            run_id=run_id,
            root=root,
            figures=root / "figures",
            reports=root / "reports",
            logs=root / "logs",
        )
        for directory in (paths.figures, paths.reports, paths.logs):
            directory.mkdir(exist_ok=True)
        return paths

    @property
    def log_path(self) -> Path:
        return self.logs / LOG_FILENAME

    def get_config_path(self) -> Path:
        """Destination of the resolved configuration manifest."""
        return self.root / "config.yaml"

    def report_path(self, fmt: str) -> Path:
        """Destination of the evaluation summary for the given format."""
        return self.reports / f"evaluation_summary.{fmt}"
