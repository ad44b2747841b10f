import logging
import random
import time

from tqdm import tqdm

from .construction import best_initial_solution
from .destroy import destroy
from .evaluation import is_feasible, objective
from .instance import EMPTY_SOLUTION, WaveInstance
from .repair import repair
from .utils import as_deadline, describe_indices

logger = logging.getLogger(__name__)

MIN_DESTROY_RATIO = 0.1
MAX_DESTROY_RATIO = 0.3
MAX_ITERATIONS_WITHOUT_IMPROVEMENT = 1000
DEFAULT_TIME_LIMIT_MINUTES = 10


def destroy_ratio(stagnation, min_ratio=MIN_DESTROY_RATIO, max_ratio=MAX_DESTROY_RATIO,
                  max_stagnation=MAX_ITERATIONS_WITHOUT_IMPROVEMENT):
    """Grows linearly from `min_ratio` towards `max_ratio` while the search is stuck."""
    return min_ratio + (max_ratio - min_ratio) * (stagnation / max_stagnation)


def accepts(candidate_value, candidate, current_value, current):
    if candidate_value > current_value:
        return True
    return candidate_value == current_value and len(candidate.orders) > len(current.orders)


def _check_parameters(min_destroy_ratio, max_destroy_ratio, max_stagnation):
    if not 0 < min_destroy_ratio < 1 or not 0 < max_destroy_ratio < 1:
        raise ValueError(f"Destroy ratios must lie in (0, 1), got "
                         f"[{min_destroy_ratio}, {max_destroy_ratio}]")
    if min_destroy_ratio > max_destroy_ratio:
        raise ValueError(f"min_destroy_ratio {min_destroy_ratio} > max_destroy_ratio {max_destroy_ratio}")
    if max_stagnation < 1:
        raise ValueError(f"max_stagnation must be positive, got {max_stagnation}")


def search(instance, deadline, rng=None, max_stagnation=MAX_ITERATIONS_WITHOUT_IMPROVEMENT,
           min_destroy_ratio=MIN_DESTROY_RATIO, max_destroy_ratio=MAX_DESTROY_RATIO, verbose=False):
    """
    Large Neighborhood Search over waves of `instance`.

    Seeds with the best of the constructors, then repeats destroy -> repair and
    keeps a candidate when it is feasible and either raises the ratio or matches
    it with more orders. Stops when `deadline.expired()` or after `max_stagnation`
    rejected candidates in a row.

    Returns:
        (best, history): best feasible wave (EMPTY_SOLUTION if none was found) and
        the current objective after seeding and after every iteration.
    """
    _check_parameters(min_destroy_ratio, max_destroy_ratio, max_stagnation)
    rng = rng if rng is not None else random.Random()
    start_time = time.time()

    current, seeded_by = best_initial_solution(instance, rng)
    if seeded_by is None:
        logger.info("No constructor produced a feasible wave, starting from the empty wave")
    else:
        logger.info(f"Initial wave from '{seeded_by}' constructor: ratio={objective(instance, current):.4f}, "
                    f"orders={len(current.orders)}, aisles={len(current.aisles)}")

    best = current
    current_value = best_value = objective(instance, current)
    history = [current_value]

    iteration = 0
    accepted_moves = 0
    improving_moves = 0
    stagnation = 0

    with tqdm(desc='LNS', unit='it', disable=not verbose) as pbar:
        while not deadline.expired() and stagnation < max_stagnation:
            iteration += 1
            ratio = destroy_ratio(stagnation, min_destroy_ratio, max_destroy_ratio, max_stagnation)

            destroyed = destroy(instance, current, ratio, rng)
            candidate = repair(instance, destroyed)

            if is_feasible(instance, candidate):
                candidate_value = objective(instance, candidate)
                if accepts(candidate_value, candidate, current_value, current):
                    accepted_moves += 1
                    current, current_value = candidate, candidate_value
                    stagnation = 0

                    if candidate_value > best_value:
                        improving_moves += 1
                        best, best_value = candidate, candidate_value
                        logger.info(f"[it {iteration}] New best ratio={best_value:.4f}, "
                                    f"orders={len(best.orders)}, aisles={len(best.aisles)}")
                else:
                    stagnation += 1
            else:
                stagnation += 1

            logger.debug(f"[it {iteration}] ratio={ratio:.3f} destroyed to {len(destroyed.orders)} orders, "
                         f"repaired to {len(candidate.orders)}, stagnation={stagnation}")
            history.append(current_value)
            pbar.set_postfix(best=f"{best_value:.4f}", stagnation=stagnation, refresh=False)
            pbar.update(1)

    stop_reason = 'time limit' if stagnation < max_stagnation else 'stagnation'
    logger.info(f"LNS finished ({stop_reason}) after {time.time() - start_time:.2f}s: {iteration} iterations, "
                f"{accepted_moves} accepted, {improving_moves} new bests, best wave uses "
                f"{len(best.aisles)}/{instance.n_aisles} aisles, aisle cache {len(instance.aisle_cache)} entries "
                f"({instance.aisle_cache.hits} hits / {instance.aisle_cache.misses} misses)")

    if not is_feasible(instance, best):
        return EMPTY_SOLUTION, history

    logger.debug(describe_indices('Best wave orders:', best.orders))
    logger.debug(describe_indices('Best wave aisles:', best.aisles))
    return best, history


def solve(orders, aisles, n_items, wave_size_lb, wave_size_ub, time_budget, seed=None,
          max_stagnation=MAX_ITERATIONS_WITHOUT_IMPROVEMENT, min_destroy_ratio=MIN_DESTROY_RATIO,
          max_destroy_ratio=MAX_DESTROY_RATIO, verbose=False):
    """
    Select a wave of orders and the aisles needed to pick it.

    `time_budget` is either an object with an `expired()` method or a number of
    seconds. Returns a Solution; EMPTY_SOLUTION means no feasible wave was found.
    """
    instance = WaveInstance(orders, aisles, n_items, wave_size_lb, wave_size_ub)
    best, _ = search(
        instance,
        as_deadline(time_budget),
        rng=random.Random(seed),
        max_stagnation=max_stagnation,
        min_destroy_ratio=min_destroy_ratio,
        max_destroy_ratio=max_destroy_ratio,
        verbose=verbose,
    )
    return best
