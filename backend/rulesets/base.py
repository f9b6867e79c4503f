"""
Ruleset interface and the stage pipeline the built-in rulesets share.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from domain.board_state import BoardState
from domain.errors import RulesetError
from domain.snake import SnakeMove

from .settings import Settings

logger = logging.getLogger(__name__)

# A stage mutates the board it is given and returns True when the game has ended.
Stage = Callable[[BoardState, Settings, Sequence[SnakeMove]], bool]


class Ruleset:
    """
    Base class/interface for rulesets.

    A ruleset resolves one turn of moves into movement, elimination and
    food/hazard effects on a board.
    """

    def name(self) -> str:
        raise NotImplementedError("Subclasses should implement this method.")

    def settings(self) -> Settings:
        raise NotImplementedError("Subclasses should implement this method.")

    def execute(self, board_state: BoardState, moves: Sequence[SnakeMove]) -> Tuple[bool, BoardState]:
        """
        Apply moves to a board and return (game_over, next_state).

        The input state is left untouched.

        Raises:
            RulesetError: If the moves cannot be applied. The error carries
                the partially updated state.
        """
        raise NotImplementedError("Subclasses should implement this method.")


class PipelineRuleset(Ruleset):
    """
    A ruleset made of an ordered list of stages.

    Every stage runs on a copy of the input board; a stage reporting game
    over does not stop the later stages.
    """

    def __init__(self, name: str, stages: List[Stage], settings: Optional[Settings] = None):
        self._name = name
        self._stages = list(stages)
        self._settings = settings or Settings()

    def name(self) -> str:
        return self._name

    def settings(self) -> Settings:
        return self._settings

    def execute(self, board_state: BoardState, moves: Sequence[SnakeMove]) -> Tuple[bool, BoardState]:
        next_state = board_state.clone()
        game_over = False
        for stage in self._stages:
            try:
                ended = stage(next_state, self._settings, moves)
            except RulesetError as e:
                raise RulesetError(str(e), board_state=next_state) from e
            if ended:
                game_over = True

        logger.debug(f"Ruleset {self._name} executed turn {board_state.turn}, game_over={game_over}")
        return game_over, next_state

    def __repr__(self):
        return f"<PipelineRuleset {self._name} stages={len(self._stages)}>"
