"""
Order batching for the Wave Order Picking problem.

Selects a wave of orders and the aisles needed to pick it, maximizing units
picked per visited aisle, with a Large Neighborhood Search under a time budget.
"""
from .algorithms import EMPTY_SOLUTION, Deadline, Solution, solve

__all__ = ['EMPTY_SOLUTION', 'Deadline', 'Solution', 'solve']
