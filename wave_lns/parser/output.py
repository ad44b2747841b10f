import logging

logger = logging.getLogger(__name__)


def write(solution, output_file_path):
    """
    Writes the solution in the required format
    """
    selected_orders = sorted(solution.orders)
    visited_aisles = sorted(solution.aisles)
    with open(output_file_path, 'w') as file:
        file.write(f"{len(selected_orders)}\n")
        for order in selected_orders:
            file.write(f"{order}\n")
        file.write(f"{len(visited_aisles)}\n")
        for aisle in visited_aisles:
            file.write(f"{aisle}\n")


def status(solution, ratio, elapsed_seconds):
    logger.info("")
    logger.info("SUMMARY:")
    logger.info(f"Total time: {elapsed_seconds:.2f} seconds")
    if solution.is_empty():
        logger.info("No feasible wave found.")
        return

    logger.info(f"Best ratio found: {ratio:.2f}")
    logger.info("=" * 60)
    logger.info(f"Selected orders ({len(solution.orders)}): {sorted(solution.orders)}")
    logger.info(f"Visited aisles ({len(solution.aisles)}): {sorted(solution.aisles)}")
