"""
Logging Package.

Logger bootstrap, style constants and run reporting.
"""

from .logger import ColorFormatter, Logger
from .reporter import Reporter, log_pipeline_summary
from .styles import LogStyle

__all__ = [
    "Logger",
    "ColorFormatter",
    "LogStyle",
    "Reporter",
    "log_pipeline_summary",
]
