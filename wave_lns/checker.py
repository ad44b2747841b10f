RATIO_TOLERANCE = 1e-4


def verify_solution(solution, orders, aisles, l_bound, r_bound, expected_ratio=None):
    """
    Independently checks that a wave satisfies every constraint of the problem.

    Args:
        solution: Solution with `orders` and `aisles` index sets
        orders: List of {item_id: quantity}
        aisles: List of {item_id: capacity}
        l_bound: Lower bound on wave size
        r_bound: Upper bound on wave size
        expected_ratio: Optional ratio to compare against the recomputed one

    Returns:
        tuple: (is_valid, message, stats)
    """
    selected_orders = sorted(solution.orders)
    selected_aisles = sorted(solution.aisles)

    # 1. Indices in range
    for i in selected_orders:
        if not 0 <= i < len(orders):
            return False, f"Order index {i} out of range", {}
    for j in selected_aisles:
        if not 0 <= j < len(aisles):
            return False, f"Aisle index {j} out of range", {}

    # 2. At least one order and one aisle
    if not selected_orders:
        return False, "No orders selected", {}
    if not selected_aisles:
        return False, "No aisles selected", {}

    # 3. Wave size within [L, R]
    total_quantity = sum(sum(orders[i].values()) for i in selected_orders)
    if total_quantity < l_bound:
        return False, f"Total quantity {total_quantity} < lower bound {l_bound}", {}
    if total_quantity > r_bound:
        return False, f"Total quantity {total_quantity} > upper bound {r_bound}", {}

    # 4. Capacity per item
    demand = {}
    for i in selected_orders:
        for item_id, quantity in orders[i].items():
            demand[item_id] = demand.get(item_id, 0) + quantity
    capacity = {}
    for j in selected_aisles:
        for item_id, quantity in aisles[j].items():
            capacity[item_id] = capacity.get(item_id, 0) + quantity

    for item_id, total_demand in sorted(demand.items()):
        total_capacity = capacity.get(item_id, 0)
        if total_demand > total_capacity:
            return False, f"Item {item_id}: demand {total_demand} > capacity {total_capacity}", {}

    # 5. Objective value
    calculated_ratio = total_quantity / len(selected_aisles)
    if expected_ratio is not None and abs(calculated_ratio - expected_ratio) > RATIO_TOLERANCE:
        return False, (f"Wrong objective value: calculated {calculated_ratio:.6f}, "
                       f"expected {expected_ratio:.6f}"), {}

    stats = {
        'selected_orders': selected_orders,
        'selected_aisles': selected_aisles,
        'num_selected_orders': len(selected_orders),
        'num_selected_aisles': len(selected_aisles),
        'total_quantity': total_quantity,
        'calculated_ratio': calculated_ratio,
        'range_compliance': f"[{l_bound}, {r_bound}]",
        'capacity_items_checked': len(demand),
    }
    return True, "Valid solution - all constraints satisfied", stats
