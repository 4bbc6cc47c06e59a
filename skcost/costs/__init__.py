"""Segment costs for cost-based change detection."""

from ._l2_cost import L2Cost

COSTS = [
    L2Cost,
]

__all__ = ["L2Cost"]
