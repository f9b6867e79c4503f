"""
GameMap interface and the hook runners used by the turn advancer.

Maps inject game-mode effects (food spawning, hazards) before and after a
ruleset resolves moves. The runners hand each hook a copy of the board, so a
hook can edit freely without touching the caller's state.
"""

import logging
import random
from typing import List

from domain.board_state import BoardState
from domain.errors import MapError
from domain.snake import Point
from rulesets.settings import Settings
from rulesets.stages import DIRECTION_VECTORS

logger = logging.getLogger(__name__)


class GameMap:
    """
    Base class/interface for game maps.

    Hooks edit the board they receive in place.
    """

    def id(self) -> str:
        raise NotImplementedError("Subclasses should implement this method.")

    def pre_update_board(self, board_state: BoardState, settings: Settings) -> None:
        """Called before the ruleset resolves moves."""

    def post_update_board(self, board_state: BoardState, settings: Settings) -> None:
        """Called after the ruleset resolves moves."""

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id()}>"


def _run_hook(game_map: GameMap, hook_name: str, board_state: BoardState, settings: Settings) -> BoardState:
    next_state = board_state.clone()
    try:
        getattr(game_map, hook_name)(next_state, settings)
    except MapError as e:
        raise MapError(str(e), board_state=next_state) from e
    logger.debug(f"Map {game_map.id()} ran {hook_name} on turn {board_state.turn}")
    return next_state


def pre_update_board(game_map: GameMap, board_state: BoardState, settings: Settings) -> BoardState:
    """
    Run the map's pre-update hook on a copy of the board and return the copy.

    Raises:
        MapError: If the hook fails. The error carries the edited copy.
    """
    return _run_hook(game_map, "pre_update_board", board_state, settings)


def post_update_board(game_map: GameMap, board_state: BoardState, settings: Settings) -> BoardState:
    """
    Run the map's post-update hook on a copy of the board and return the copy.

    Raises:
        MapError: If the hook fails. The error carries the edited copy.
    """
    return _run_hook(game_map, "post_update_board", board_state, settings)


def get_unoccupied_points(board_state: BoardState, include_possible_moves: bool = False,
                          include_hazards: bool = False) -> List[Point]:
    """
    Return every board cell free of snakes and food.

    Args:
        include_possible_moves: keep cells a snake head could move onto next turn
        include_hazards: keep hazard cells
    """
    occupied = set(board_state.food)
    for snake in board_state.alive_snakes():
        occupied.update(snake.body)
        if not include_possible_moves and snake.body:
            for dx, dy in DIRECTION_VECTORS.values():
                occupied.add(Point(snake.head.x + dx, snake.head.y + dy))
    if not include_hazards:
        occupied.update(board_state.hazards)

    return [
        Point(x, y)
        for x in range(board_state.width)
        for y in range(board_state.height)
        if Point(x, y) not in occupied
    ]


def place_food_randomly(rand: random.Random, board_state: BoardState, n: int) -> None:
    """Place up to n food on random unoccupied cells."""
    candidates = get_unoccupied_points(board_state)
    rand.shuffle(candidates)
    board_state.food.extend(candidates[:n])
