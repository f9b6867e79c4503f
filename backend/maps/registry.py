"""
Registry for named game maps.
"""

from typing import Callable, Dict

from domain.errors import MapNotFoundError

from .base import GameMap
from .royale import RoyaleMap
from .standard import EmptyMap, StandardMap

MAP_LOADERS: Dict[str, Callable[[], GameMap]] = {
    "empty": EmptyMap,
    "standard": StandardMap,
    "royale": RoyaleMap,
}

AVAILABLE_MAPS = list(MAP_LOADERS.keys())


def get_map(name: str) -> GameMap:
    """
    Get the game map registered under a name.

    Raises:
        MapNotFoundError: If name is not recognized.
    """
    if name not in MAP_LOADERS:
        available = ", ".join(AVAILABLE_MAPS)
        raise MapNotFoundError(f"Unknown map '{name}'. Available maps: {available}")

    return MAP_LOADERS[name]()
