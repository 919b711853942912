"""
Pipeline Package

Stage sequencing for a complete classification run.
"""

from .phases import PipelineResult, run_exploration_phase, run_training_phase

__all__ = [
    "PipelineResult",
    "run_exploration_phase",
    "run_training_phase",
]
