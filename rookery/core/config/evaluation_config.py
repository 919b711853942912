"""
Evaluation & Reporting Configuration.

Aesthetic and output policy for the evaluation stage: figure resolution,
heatmap colormap, matplotlib style, report file format and whether plots are
rendered at all.
"""

import argparse

from pydantic import BaseModel, ConfigDict, Field

from .types import DPI, ReportFormat


class EvaluationConfig(BaseModel):
    """Visual and reporting policy for the final evaluation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fig_dpi: DPI = Field(default=200, description="Plot resolution")
    cmap_confusion: str = Field(default="Blues", description="Confusion heatmap colormap")
    plot_style: str = Field(default="default", description="Matplotlib style sheet")
    report_format: ReportFormat = Field(default="xlsx", description="Summary format")
    save_plots: bool = Field(default=True, description="Render exploratory and heatmap plots")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "EvaluationConfig":
        """Only overrides schema fields present in args and not None."""
        params = {
            k: v for k, v in vars(args).items()
            if k in cls.model_fields and v is not None
        }
        return cls(**params)
