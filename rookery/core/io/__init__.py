"""
Input/Output & Persistence Utilities.

This module manages the pipeline's interaction with the filesystem for
configuration serialization (YAML).
"""

from .serialization import load_config_from_yaml, save_config_as_yaml

__all__ = [
    "save_config_as_yaml",
    "load_config_from_yaml",
]
