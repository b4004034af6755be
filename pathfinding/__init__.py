# pathfinding/__init__.py
import importlib
import pkgutil
from typing import Dict, List

from errors import NotFoundError
from .base import PathfindingAlgorithm

PATHFINDING_ALGOS: Dict[str, PathfindingAlgorithm] = {}

# canonical order used by benchmarks and "run all"
DEFAULT_ORDER = ("AStar", "Dijkstra", "BFS", "DFS", "GBFS")


def load_algorithms() -> None:
    global PATHFINDING_ALGOS
    found: Dict[str, PathfindingAlgorithm] = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        name = info.name
        if name in {"base", "search", "frontiers", "__init__"}:
            continue
        module = importlib.import_module(f"{package}.{name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.name in found:
            raise ValueError(f"Duplicate pathfinding name: {algo.name}")
        found[algo.name] = algo

    ordered = [n for n in DEFAULT_ORDER if n in found]
    ordered += sorted(n for n in found if n not in DEFAULT_ORDER)
    PATHFINDING_ALGOS = {n: found[n] for n in ordered}


def algorithm_names() -> List[str]:
    return list(PATHFINDING_ALGOS)


def get_algorithm(name: str) -> PathfindingAlgorithm:
    try:
        return PATHFINDING_ALGOS[name]
    except KeyError:
        raise NotFoundError(
            f"Unknown pathfinding algorithm: {name!r} (available: {algorithm_names()})"
        ) from None


load_algorithms()
