from .evaluation import is_feasible
from .instance import Solution

SHARED_AISLE_BONUS = 0.5


def repair_score(instance, order, current_aisles):
    """
    Units per newly opened aisle, plus a bonus for every aisle the order shares
    with the current wave.
    """
    required = instance.order_aisles[order]
    new_aisles = len(required - current_aisles)
    shared_aisles = len(required) - new_aisles
    return instance.order_units[order] / max(1, new_aisles) + shared_aisles * SHARED_AISLE_BONUS


def repair(instance, solution):
    """
    Grow a (possibly destroyed) wave back with a single greedy pass.

    Unselected orders are ranked once by `repair_score` against the starting
    aisle set (equal scores keep the lowest order index first) and each one is
    kept only if the tentative wave stays feasible. Selected orders are never removed.
    """
    selected = frozenset(solution.orders)
    current_aisles = instance.aisles_for(selected)
    total_units = instance.units_for(selected)

    unselected = [o for o in range(instance.n_orders) if o not in selected]
    scores = {o: repair_score(instance, o, current_aisles) for o in unselected}
    unselected.sort(key=scores.__getitem__, reverse=True)

    working_aisles = current_aisles
    for o in unselected:
        units = instance.order_units[o]
        if total_units + units > instance.wave_size_ub:
            continue

        candidate = Solution(selected | {o}, working_aisles | instance.order_aisles[o])
        if is_feasible(instance, candidate):
            selected, working_aisles = candidate
            total_units += units

    return instance.make_solution(selected)
