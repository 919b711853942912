"""
Telemetry & Filesystem Manifest.

Defines where run artifacts are written and how verbose logging is. Relative
output directories are anchored to the project root; `to_portable_dict`
reverses the anchoring so exported manifests do not leak host paths.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse
from pathlib import Path

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, field_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .types import LogLevel, ValidatedPath
from ..paths import PROJECT_ROOT

# =========================================================================== #
#                             TELEMETRY CONFIGURATION                         #
# =========================================================================== #

class TelemetryConfig(BaseModel):
    """
    Declarative manifest for logging and output location.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    project_name: str = Field(default="rookery")
    output_dir: ValidatedPath = Field(default="./outputs")
    log_level: LogLevel = Field(default="INFO")

    def to_portable_dict(self) -> dict:
        """
        Dumps the configuration with `output_dir` made project-relative when
        it lives under PROJECT_ROOT.
        """
        data = self.model_dump()
        full_path = Path(data["output_dir"])
        if full_path.is_relative_to(PROJECT_ROOT):
            data["output_dir"] = f"./{full_path.relative_to(PROJECT_ROOT)}"
        else:
            data["output_dir"] = str(full_path)
        return data

    @field_validator("output_dir", mode="before")
    @classmethod
    def resolve_relative_paths(cls, v):
        """
        Ensures paths are always anchored to the PROJECT_ROOT.
        If 'v' is already absolute, it's kept as is (allowing external mounts).
        """
        path = Path(v)
        if not path.is_absolute():
            return (PROJECT_ROOT / path).resolve()
        return path.resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TelemetryConfig":
        """
        Factory method to map CLI arguments to the TelemetryConfig schema.
        """
        params = {
            k: getattr(args, k)
            for k in cls.model_fields
            if getattr(args, k, None) is not None
        }
        return cls(**params)
