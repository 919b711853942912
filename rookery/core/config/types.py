"""
Semantic Type Definitions & Validation Primitives.

Centralizes the Annotated types shared by every configuration schema so that
invalid values (a split proportion of 1.0, a negative tree count, an unknown
log level) are rejected when the configuration is parsed, before any pipeline
stage runs.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from pathlib import Path
from typing import Annotated, Literal

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import AfterValidator, Field

# =========================================================================== #
#                                VALIDATORS                                   #
# =========================================================================== #

def _ensure_dir(v: Path) -> Path:
    "Ensure paths are absolute and create folders if missing."
    v.mkdir(parents=True, exist_ok=True)
    return v.resolve()


def _expand_path(v: Path) -> Path:
    "Expand user home and make absolute without touching the filesystem."
    return v.expanduser().resolve()


def _non_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("Column name must not be blank")
    return v.strip()

# =========================================================================== #
#                                TYPE ALIASES                                 #
# =========================================================================== #

ValidatedPath = Annotated[Path, AfterValidator(_ensure_dir)]
FilePath = Annotated[Path, AfterValidator(_expand_path)]
ColumnName = Annotated[str, AfterValidator(_non_blank)]
PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]
Proportion = Annotated[float, Field(gt=0.0, lt=1.0)]
DPI = Annotated[int, Field(ge=50, le=600)]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ReportFormat = Literal["xlsx", "csv", "json"]
ModelName = Literal["random_forest", "logistic_regression"]
