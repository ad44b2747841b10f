import numpy as np


def is_feasible(instance, solution):
    """
    Hard constraint check for a wave.

    A solution is feasible when both index sets are non-empty, the total picked
    units lie in [wave_size_lb, wave_size_ub] and no item is demanded beyond what
    the visited aisles hold. Infeasibility is reported as False, never raised.
    """
    if solution.is_empty():
        return False

    picked = instance.demand_per_item(solution.orders)
    total_units = picked.sum()
    if total_units < instance.wave_size_lb or total_units > instance.wave_size_ub:
        return False

    available = instance.capacity_per_item(solution.aisles)
    return bool(np.all(picked <= available))


def objective(instance, solution):
    """Units picked per visited aisle; 0.0 for an empty wave. Does not check feasibility."""
    if solution.is_empty():
        return 0.0
    return instance.units_for(solution.orders) / max(1, len(solution.aisles))
