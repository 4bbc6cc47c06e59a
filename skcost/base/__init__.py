"""Base classes for interval scorers in skcost."""

from ._base_interval_scorer import BaseIntervalScorer

__all__ = ["BaseIntervalScorer"]
