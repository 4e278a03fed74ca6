"""
Strategy Factory Module - Name-based lookup of search strategies.
"""

from typing import Any, Dict, List, Type

from .base import SolverStrategy


# Strategy classes by name, in registration order
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "astar"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Example:
        @register_strategy
        class BreadthFirst(SolverStrategy):
            name = "bfs"

    Raises:
        ValueError: If another class already uses the name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Strategy name '{cls.name}' already registered by {existing.__name__}")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered name, e.g. "ucs" or "idastar"
        **kwargs: Constructor options, e.g. heuristic="h2"

    Raises:
        ValueError: For an unknown strategy or heuristic name
    """
    cls = _STRATEGIES.get(name.lower())
    if cls is None:
        known = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {known}")
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, Any]]:
    """
    Metadata of every registered strategy, for menus and comparisons.

    Returns:
        Dicts with 'name', 'description', 'uses_heuristic' and 'optimal'
    """
    return [
        {
            "name": cls.name,
            "description": cls.description,
            "uses_heuristic": cls.uses_heuristic,
            "optimal": cls.optimal,
        }
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """A* when registered, otherwise the first registered name ("" if none)."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
