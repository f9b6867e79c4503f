"""
Domain entities for the snake turn simulator.

This module contains the core board entities that are independent of
transport concerns (HTTP, JSON, etc.).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, NOT_ELIMINATED, SNAKE_MAX_HEALTH
from .snake import Point, Snake, SnakeMove
from .board_state import BoardState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'NOT_ELIMINATED', 'SNAKE_MAX_HEALTH',
    'Point',
    'Snake',
    'SnakeMove',
    'BoardState',
]
