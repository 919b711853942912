"""
Configuration Package.

Pydantic schemas describing every tunable aspect of a pipeline run.
"""

from .dataset_config import DatasetConfig
from .engine import Config
from .evaluation_config import EvaluationConfig
from .model_config import ModelConfig
from .split_config import SplitConfig
from .telemetry_config import TelemetryConfig

__all__ = [
    "Config",
    "DatasetConfig",
    "SplitConfig",
    "ModelConfig",
    "EvaluationConfig",
    "TelemetryConfig",
]
