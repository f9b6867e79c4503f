"""
Royale map: the safe area shrinks by one side every few turns and
everything outside it becomes hazard.
"""

import random

from domain.board_state import BoardState
from domain.errors import MapError
from domain.snake import Point
from rulesets.settings import Settings

from .base import GameMap
from .standard import maybe_spawn_food


class RoyaleMap(GameMap):

    def id(self) -> str:
        return "royale"

    def post_update_board(self, board_state: BoardState, settings: Settings) -> None:
        maybe_spawn_food(settings.get_rand(board_state.turn), board_state, settings)
        self.populate_hazards(board_state, settings)

    def populate_hazards(self, board_state: BoardState, settings: Settings) -> None:
        if settings.shrink_every_n_turns < 1:
            raise MapError("royale shrink_every_n_turns must be at least 1")

        board_state.hazards = []
        turn = board_state.turn
        if turn < settings.shrink_every_n_turns:
            return

        # Same seed every turn so earlier shrinks stay in place
        rand = random.Random(settings.seed)
        min_x, max_x = 0, board_state.width - 1
        min_y, max_y = 0, board_state.height - 1
        # After width + height shrinks the whole board is hazard
        num_shrinks = min(turn // settings.shrink_every_n_turns, board_state.width + board_state.height)
        for _ in range(num_shrinks):
            side = rand.randrange(4)
            if side == 0:
                min_x += 1
            elif side == 1:
                max_x -= 1
            elif side == 2:
                min_y += 1
            else:
                max_y -= 1

        for x in range(board_state.width):
            for y in range(board_state.height):
                if x < min_x or x > max_x or y < min_y or y > max_y:
                    board_state.hazards.append(Point(x, y))
