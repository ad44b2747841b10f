import logging

logger = logging.getLogger(__name__)


def _parse_mapping(line):
    # Format: num_items item1 qty1 item2 qty2 ...
    parts = line.split()
    num_items = int(parts[0])
    if len(parts) != 1 + 2 * num_items:
        raise ValueError(f"Expected {num_items} item/quantity pairs, got: {line!r}")

    items = {}
    for j in range(num_items):
        item_id = int(parts[1 + j * 2])
        quantity = int(parts[1 + j * 2 + 1])
        items[item_id] = items.get(item_id, 0) + quantity
    return items


def parse(lines):
    """
    Parse an instance from its text lines.

    Returns:
        (orders, aisles, n_items, wave_size_lb, wave_size_ub) where orders and
        aisles are lists of {item_id: quantity}.
    """
    lines = [line.strip() for line in lines if line.strip()]
    if not lines:
        raise ValueError("Empty instance")

    # First line: n_orders, n_items, n_aisles
    n_orders, n_items, n_aisles = map(int, lines[0].split())
    if len(lines) != n_orders + n_aisles + 2:
        raise ValueError(f"Expected {n_orders + n_aisles + 2} non-empty lines, got {len(lines)}")

    orders = [_parse_mapping(line) for line in lines[1:1 + n_orders]]
    aisles = [_parse_mapping(line) for line in lines[1 + n_orders:1 + n_orders + n_aisles]]

    # Last line: L, R
    wave_size_lb, wave_size_ub = map(int, lines[-1].split())
    return orders, aisles, n_items, wave_size_lb, wave_size_ub


def read(filename):
    try:
        with open(filename, 'r') as f:
            lines = f.readlines()
    except FileNotFoundError:
        logger.error(f"Instance file not found: {filename}")
        return None

    if not any(line.strip() for line in lines):
        logger.error(f"Instance file is empty: {filename}")
        return None

    orders, aisles, n_items, wave_size_lb, wave_size_ub = parse(lines)
    logger.info(f"Instance {filename}: {len(orders)} orders, {n_items} items, {len(aisles)} aisles, "
                f"wave bounds [{wave_size_lb}, {wave_size_ub}]")
    return orders, aisles, n_items, wave_size_lb, wave_size_ub
