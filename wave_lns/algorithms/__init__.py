# Search building blocks
from .instance import EMPTY_SOLUTION, Solution, WaveInstance
from .evaluation import is_feasible, objective
from .construction import construct_by_efficiency, construct_by_units, construct_random, greedy_insert
from .destroy import destroy, destroy_by_dispersion, destroy_by_efficiency
from .repair import repair
from .lns import search, solve
from .utils import Deadline

__all__ = [
    'EMPTY_SOLUTION',
    'Solution',
    'WaveInstance',
    'is_feasible',
    'objective',
    'construct_by_efficiency',
    'construct_by_units',
    'construct_random',
    'greedy_insert',
    'destroy',
    'destroy_by_dispersion',
    'destroy_by_efficiency',
    'repair',
    'search',
    'solve',
    'Deadline',
]
