"""
Trainer Package

Formula parsing and the fit step of the pipeline.
"""

from .formula import Formula
from .trainer import FittedModel, ModelTrainer, fit_model, label_domain

__all__ = [
    "Formula",
    "FittedModel",
    "ModelTrainer",
    "fit_model",
    "label_domain",
]
