import math


def removal_count(size, ratio):
    # Half-up rounding: 10 orders at 0.1 -> 1, at 0.2998 -> 3
    return min(size, max(1, int(math.floor(size * ratio + 0.5))))


def _remove_first(instance, solution, ranked, ratio):
    removed = set(ranked[:removal_count(len(ranked), ratio)])
    return instance.make_solution(o for o in solution.orders if o not in removed)


def destroy_by_dispersion(instance, solution, ratio):
    """Drop the orders that touch the most aisles."""
    ranked = sorted(sorted(solution.orders), key=lambda o: len(instance.order_aisles[o]), reverse=True)
    return _remove_first(instance, solution, ranked, ratio)


def destroy_by_efficiency(instance, solution, ratio):
    """Drop the orders with the fewest units per touched aisle."""
    ranked = sorted(sorted(solution.orders), key=lambda o: instance.order_efficiency[o])
    return _remove_first(instance, solution, ranked, ratio)


DESTROY_OPERATORS = (destroy_by_dispersion, destroy_by_efficiency)


def destroy(instance, solution, ratio, rng):
    """Remove a `ratio` share of the selected orders with a randomly chosen policy."""
    if not solution.orders:
        return solution
    operator = DESTROY_OPERATORS[0] if rng.random() < 0.5 else DESTROY_OPERATORS[1]
    return operator(instance, solution, ratio)
