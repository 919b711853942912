"""
Core Package.

Configuration, logging, filesystem layout, error taxonomy and run lifecycle
shared by every stage of the pipeline.
"""

# =========================================================================== #
#                                Configuration                                #
# =========================================================================== #
from .config import (
    Config,
    DatasetConfig,
    EvaluationConfig,
    ModelConfig,
    SplitConfig,
    TelemetryConfig,
)

# =========================================================================== #
#                                Errors                                       #
# =========================================================================== #
from .exceptions import (
    DataQualityError,
    EvaluationFailureError,
    InvalidArgumentError,
    RookeryError,
    TrainingFailureError,
)

# =========================================================================== #
#                                Infrastructure                               #
# =========================================================================== #
from .cli import parse_args
from .logger import Logger, LogStyle, Reporter, log_pipeline_summary
from .orchestrator import RootOrchestrator, TimeTracker
from .paths import LOGGER_NAME, PROJECT_ROOT, RunPaths

__all__ = [
    "Config",
    "DatasetConfig",
    "SplitConfig",
    "ModelConfig",
    "EvaluationConfig",
    "TelemetryConfig",
    "RookeryError",
    "InvalidArgumentError",
    "DataQualityError",
    "TrainingFailureError",
    "EvaluationFailureError",
    "parse_args",
    "Logger",
    "LogStyle",
    "Reporter",
    "log_pipeline_summary",
    "RootOrchestrator",
    "TimeTracker",
    "LOGGER_NAME",
    "PROJECT_ROOT",
    "RunPaths",
]
