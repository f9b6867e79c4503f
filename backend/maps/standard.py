"""
Standard and empty maps.
"""

import random

from domain.board_state import BoardState
from rulesets.settings import Settings

from .base import GameMap, place_food_randomly


class EmptyMap(GameMap):
    """A map that never changes the board."""

    def id(self) -> str:
        return "empty"


def maybe_spawn_food(rand: random.Random, board_state: BoardState, settings: Settings) -> None:
    """
    Top food up to settings.minimum_food, otherwise roll
    settings.food_spawn_chance percent for one extra food.
    """
    num_current_food = len(board_state.food)
    if num_current_food < settings.minimum_food:
        place_food_randomly(rand, board_state, settings.minimum_food - num_current_food)
    elif settings.food_spawn_chance > 0 and rand.randrange(100) < settings.food_spawn_chance:
        place_food_randomly(rand, board_state, 1)


class StandardMap(GameMap):
    """The default map: no hazards, food spawned after every turn."""

    def id(self) -> str:
        return "standard"

    def post_update_board(self, board_state: BoardState, settings: Settings) -> None:
        rand = settings.get_rand(board_state.turn)
        maybe_spawn_food(rand, board_state, settings)
