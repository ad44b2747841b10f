from collections import namedtuple

import numpy as np

AISLE_CACHE_MAX_KEY_SIZE = 20


class Solution(namedtuple('Solution', ['orders', 'aisles'])):
    """A wave: selected order indices plus the aisle indices visited to pick them."""
    __slots__ = ()

    def is_empty(self):
        return not self.orders or not self.aisles


EMPTY_SOLUTION = Solution(frozenset(), frozenset())


class AisleUnionCache:
    """
    Memo of order set -> union of the aisles those orders touch.

    Only sets with at most `max_key_size` orders are stored, so the table stays
    small. A miss always recomputes the union from the per-order aisle sets.
    """

    def __init__(self, order_aisles, max_key_size=AISLE_CACHE_MAX_KEY_SIZE):
        self.order_aisles = order_aisles
        self.max_key_size = max_key_size
        self.table = {}
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self.table)

    def get(self, orders):
        key = frozenset(orders)
        cached = self.table.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        union = frozenset().union(*(self.order_aisles[o] for o in key))
        if len(key) <= self.max_key_size:
            self.table[key] = union
        return union


class WaveInstance:
    """
    Read-only view of one problem instance plus everything derived from it.

    `orders` and `aisles` are sequences of {item_id: quantity}; their position is
    the order/aisle index. Derived data is computed once in `preprocess_data`.
    """

    def __init__(self, orders, aisles, n_items, wave_size_lb, wave_size_ub,
                 cache_max_key_size=AISLE_CACHE_MAX_KEY_SIZE):
        self.orders = orders
        self.aisles = aisles
        self.n_items = n_items
        self.wave_size_lb = wave_size_lb
        self.wave_size_ub = wave_size_ub

        self.order_units = None  # Units per order
        self.order_aisles = None  # Aisles touched by each order
        self.order_efficiency = None  # Units per touched aisle
        self.item_locations = None  # Aisles that list each item
        self.preprocess_data()

        self.aisle_cache = AisleUnionCache(self.order_aisles, cache_max_key_size)

    @property
    def n_orders(self):
        return len(self.orders)

    @property
    def n_aisles(self):
        return len(self.aisles)

    def preprocess_data(self):
        """Precompute per-order units, aisle sets and dense item vectors"""
        self.item_locations = {}
        for j, aisle in enumerate(self.aisles):
            for item_id in aisle:
                self.item_locations.setdefault(item_id, []).append(j)

        self.order_units = [sum(order.values()) for order in self.orders]

        self.order_aisles = []
        for order in self.orders:
            required_aisles = set()
            for item_id, quantity in order.items():
                if quantity > 0:
                    required_aisles.update(self.item_locations.get(item_id, ()))
            self.order_aisles.append(frozenset(required_aisles))

        self.order_efficiency = [
            units / len(aisles) if aisles else 0.0
            for units, aisles in zip(self.order_units, self.order_aisles)
        ]

        # Sparse (ids, quantities) pairs, summed with bincount into dense per-item arrays
        self._order_vectors = [self._as_vectors(order) for order in self.orders]
        self._aisle_vectors = [self._as_vectors(aisle) for aisle in self.aisles]

    @staticmethod
    def _as_vectors(mapping):
        ids = np.fromiter(mapping.keys(), dtype=np.int64, count=len(mapping))
        quantities = np.fromiter(mapping.values(), dtype=np.float64, count=len(mapping))
        return ids, quantities

    def _accumulate(self, vectors, indices):
        if not indices:
            return np.zeros(self.n_items)
        ids = np.concatenate([vectors[i][0] for i in indices])
        quantities = np.concatenate([vectors[i][1] for i in indices])
        return np.bincount(ids, weights=quantities, minlength=self.n_items)

    def demand_per_item(self, orders):
        """Total requested units per item over `orders` (dense array of length n_items)."""
        return self._accumulate(self._order_vectors, list(orders))

    def capacity_per_item(self, aisles):
        """Total available units per item over `aisles` (dense array of length n_items)."""
        return self._accumulate(self._aisle_vectors, list(aisles))

    def units_for(self, orders):
        return sum(self.order_units[o] for o in orders)

    def aisles_for(self, orders):
        return self.aisle_cache.get(orders)

    def make_solution(self, orders):
        """Build a Solution whose aisle set is recomputed from `orders`."""
        orders = frozenset(orders)
        if not orders:
            return EMPTY_SOLUTION
        return Solution(orders, self.aisles_for(orders))
