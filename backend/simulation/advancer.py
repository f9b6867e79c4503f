"""
Advance a board by exactly one turn.

The sequence is fixed: map pre-update hook, ruleset execute, map post-update
hook, then the turn counter is incremented. The first failing phase stops the
turn; the raised SimulationError carries the most recent board state.
"""

import logging
from typing import Optional, Sequence

import config
import maps
import rulesets
from domain.board_state import BoardState
from domain.errors import (
    ExecuteError,
    MapError,
    MapLoadError,
    MapNotFoundError,
    PostUpdateError,
    PreUpdateError,
    RulesetError,
)
from domain.snake import SnakeMove
from rulesets.settings import Settings

logger = logging.getLogger(__name__)


def create_next_board_state(
    board_state: BoardState,
    moves: Sequence[SnakeMove],
    ruleset_name: Optional[str] = None,
    map_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> BoardState:
    """
    Run one turn against a board.

    Args:
        board_state: the current board; never modified
        moves: at most one move per snake id, resolved by the ruleset
        ruleset_name: name looked up in the ruleset registry; config.DEFAULT_RULESET when omitted
        map_name: name looked up in the map registry; config.DEFAULT_MAP when omitted
        settings: ruleset settings; defaults when omitted

    Returns:
        The board for the next turn, with turn incremented by 1.

    Raises:
        RulesetNotFoundError: If ruleset_name is unknown.
        MapLoadError: If map_name is unknown.
        PreUpdateError, ExecuteError, PostUpdateError: If a phase fails.
    """
    ruleset_name = ruleset_name or config.DEFAULT_RULESET
    map_name = map_name or config.DEFAULT_MAP
    ruleset = rulesets.get_ruleset(ruleset_name, settings)

    try:
        game_map = maps.get_map(map_name)
    except MapNotFoundError as e:
        raise MapLoadError(f"Failed to load game map '{map_name}': {e}", board_state=board_state) from e

    # Map hooks run before the ruleset sees the moves
    try:
        board_state = maps.pre_update_board(game_map, board_state, ruleset.settings())
    except MapError as e:
        raise PreUpdateError(f"Error pre-updating board with game map: {e}", board_state=board_state) from e

    try:
        _, board_state = ruleset.execute(board_state, moves)
    except RulesetError as e:
        raise ExecuteError(
            f"Error updating board state from ruleset: {e}",
            board_state=e.board_state or board_state,
        ) from e

    # Map hooks run after the ruleset has applied the moves
    try:
        board_state = maps.post_update_board(game_map, board_state, ruleset.settings())
    except MapError as e:
        raise PostUpdateError(
            f"Error post-updating board with game map: {e}",
            board_state=e.board_state or board_state,
        ) from e

    board_state.turn += 1
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Advanced board to turn {board_state.turn} with {ruleset.name()} ruleset on {game_map.id()} map:\n"
            f"{board_state.print_board()}"
        )

    return board_state
