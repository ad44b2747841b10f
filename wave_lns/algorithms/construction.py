import logging

from .evaluation import is_feasible, objective
from .instance import EMPTY_SOLUTION, Solution

logger = logging.getLogger(__name__)


def greedy_insert(instance, ordered_orders):
    """
    Walk `ordered_orders` once and keep every order whose addition leaves the
    partial wave feasible. Skipped orders are never reconsidered, so an order
    that only fails because the wave is still below the lower bound stays out.
    """
    selected = frozenset()
    selected_aisles = frozenset()
    total_units = 0

    for o in ordered_orders:
        units = instance.order_units[o]
        if total_units + units > instance.wave_size_ub:
            continue

        candidate = Solution(selected | {o}, selected_aisles | instance.order_aisles[o])
        if is_feasible(instance, candidate):
            selected, selected_aisles = candidate
            total_units += units

    return instance.make_solution(selected)


def construct_by_efficiency(instance, rng=None):
    """Greedy over orders sorted by units per touched aisle, best first."""
    ranked = sorted(range(instance.n_orders), key=lambda o: instance.order_efficiency[o], reverse=True)
    return greedy_insert(instance, ranked)


def construct_by_units(instance, rng=None):
    """Greedy over orders sorted by unit count, largest first."""
    ranked = sorted(range(instance.n_orders), key=lambda o: instance.order_units[o], reverse=True)
    return greedy_insert(instance, ranked)


def construct_random(instance, rng):
    """Greedy over a uniformly shuffled order list."""
    shuffled = list(range(instance.n_orders))
    rng.shuffle(shuffled)
    return greedy_insert(instance, shuffled)


CONSTRUCTORS = (
    ('efficiency', construct_by_efficiency),
    ('units', construct_by_units),
    ('random', construct_random),
)


def best_initial_solution(instance, rng):
    """
    Run every constructor and return (solution, name) for the best feasible one.
    Ties keep the earlier constructor. Returns (EMPTY_SOLUTION, None) if none is feasible.
    """
    best, best_name, best_value = EMPTY_SOLUTION, None, None
    for name, constructor in CONSTRUCTORS:
        candidate = constructor(instance, rng)
        if not is_feasible(instance, candidate):
            logger.debug(f"Constructor '{name}': no feasible wave")
            continue

        value = objective(instance, candidate)
        logger.debug(f"Constructor '{name}': ratio={value:.4f}, "
                     f"orders={len(candidate.orders)}, aisles={len(candidate.aisles)}")
        if best_value is None or value > best_value:
            best, best_name, best_value = candidate, name, value

    return best, best_name
