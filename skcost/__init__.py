"""skcost: segment costs for changepoint detection and optimal segmentation."""

from skcost.costs import L2Cost
from skcost.utils.numba.stats import compute_cumulative_sum
from skcost.utils.validation.cuts import InvalidSegmentBoundsError

__version__ = "0.1.0"

__all__ = ["L2Cost", "InvalidSegmentBoundsError", "compute_cumulative_sum"]
