"""
Game maps add mode-specific effects (food spawning, hazards) around the
ruleset's move resolution.
"""

from .base import GameMap, pre_update_board, post_update_board
from .registry import get_map, AVAILABLE_MAPS

__all__ = [
    'GameMap',
    'pre_update_board',
    'post_update_board',
    'get_map',
    'AVAILABLE_MAPS',
]
