import argparse
import logging
import random
import sys

from .algorithms.evaluation import objective
from .algorithms.instance import WaveInstance
from .algorithms.lns import (
    DEFAULT_TIME_LIMIT_MINUTES,
    MAX_DESTROY_RATIO,
    MAX_ITERATIONS_WITHOUT_IMPROVEMENT,
    MIN_DESTROY_RATIO,
    search,
)
from .algorithms.utils import Deadline, plot_history
from .checker import verify_solution
from .parser import input as input_module
from .parser import output as output_module

logger = logging.getLogger(__name__)


def create_argument_parser():
    parser = argparse.ArgumentParser(
        description='Wave Order Picking solver (Large Neighborhood Search)')
    parser.add_argument('input_file', help='Instance file')
    parser.add_argument('output_file', nargs='?', help='Where to write the selected orders and aisles')
    parser.add_argument('--time-limit', type=float, default=DEFAULT_TIME_LIMIT_MINUTES,
                        help='Time limit in minutes (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--max-stagnation', type=int, default=MAX_ITERATIONS_WITHOUT_IMPROVEMENT,
                        help='Stop after this many non-improving iterations (default: %(default)s)')
    parser.add_argument('--min-destroy', type=float, default=MIN_DESTROY_RATIO,
                        help='Destroy ratio while improving (default: %(default)s)')
    parser.add_argument('--max-destroy', type=float, default=MAX_DESTROY_RATIO,
                        help='Destroy ratio when fully stuck (default: %(default)s)')
    parser.add_argument('--plot', metavar='PATH',
                        help="Save the convergence plot to PATH ('show' opens a window)")
    parser.add_argument('--quiet', action='store_true', help='Only log warnings and errors')
    return parser


def main(argv=None):
    args = create_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        result = input_module.read(args.input_file)
    except ValueError as e:
        logger.error(f"Malformed instance file {args.input_file}: {e}")
        return 1
    if result is None:
        logger.error("Could not read instance data")
        return 1
    orders, aisles, n_items, l_bound, r_bound = result

    deadline = Deadline.from_minutes(args.time_limit)
    instance = WaveInstance(orders, aisles, n_items, l_bound, r_bound)
    try:
        best, history = search(
            instance,
            deadline,
            rng=random.Random(args.seed),
            max_stagnation=args.max_stagnation,
            min_destroy_ratio=args.min_destroy,
            max_destroy_ratio=args.max_destroy,
            verbose=not args.quiet,
        )
    except ValueError as e:
        logger.error(f"Invalid search parameters: {e}")
        return 2

    ratio = objective(instance, best)
    output_module.status(best, ratio, deadline.elapsed())

    if args.output_file:
        output_module.write(best, args.output_file)
        logger.info(f"Solution written to {args.output_file}")

    if args.plot:
        plot_history(history, path=None if args.plot == 'show' else args.plot)

    if best.is_empty():
        return 0

    is_valid, check_msg, stats = verify_solution(best, orders, aisles, l_bound, r_bound, ratio)
    if is_valid:
        logger.info(f"VALID SOLUTION: {check_msg}")
        logger.info(f"  Selected orders: {stats['num_selected_orders']}/{len(orders)}")
        logger.info(f"  Selected aisles: {stats['num_selected_aisles']}/{len(aisles)}")
        logger.info(f"  Total quantity: {stats['total_quantity']}")
        logger.info(f"  Ratio: {stats['calculated_ratio']:.6f}")
        return 0

    logger.error(f"INVALID SOLUTION: {check_msg}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
