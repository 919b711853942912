"""
Models Package

Registry of interchangeable classification algorithms.
"""

from .factory import MODEL_REGISTRY, Classifier, get_model

__all__ = [
    "Classifier",
    "MODEL_REGISTRY",
    "get_model",
]
