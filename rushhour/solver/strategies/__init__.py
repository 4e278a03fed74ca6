"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .ucs import UniformCostStrategy
from .gbfs import GreedyBestFirstStrategy
from .astar import AStarStrategy
from .ida_star import IDAStarStrategy

__all__ = [
    "UniformCostStrategy",
    "GreedyBestFirstStrategy",
    "AStarStrategy",
    "IDAStarStrategy",
]
