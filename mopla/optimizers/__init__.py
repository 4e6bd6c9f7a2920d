"""Edge cost evaluators."""

from mopla.optimizers.euclidean_optimizer import DefaultOptimizer, EuclideanOptimizer

__all__ = ["EuclideanOptimizer", "DefaultOptimizer"]
