"""
Rookery: penguin species classification pipeline.

Loads a tabular dataset of penguin measurements, splits it into training and
testing subsets, fits a random-forest classifier and reports accuracy and
confusion-matrix metrics.
"""

__version__ = "0.1.0"
