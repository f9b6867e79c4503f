"""
Snake entity for the simulator.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple

from .constants import NOT_ELIMINATED


class Point(NamedTuple):
    """Integer grid coordinate. (0, 0) is the bottom left corner."""

    x: int
    y: int


@dataclass
class Snake:
    """
    Represents a snake on the board.

    Attributes:
        id: opaque snake identifier
        health: remaining health
        body: list of Points from head at index 0 to tail at the end
        eliminated_cause: NOT_ELIMINATED or one of the ELIMINATED_BY_* causes
        eliminated_on_turn: the turn the snake was eliminated on
        eliminated_by: id of the snake responsible, if any
    """

    id: str
    health: int
    body: List[Point] = field(default_factory=list)
    eliminated_cause: str = NOT_ELIMINATED
    eliminated_on_turn: int = 0
    eliminated_by: str = ""

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def alive(self) -> bool:
        return self.eliminated_cause == NOT_ELIMINATED

    def eliminate(self, cause: str, turn: int, by: str = "") -> None:
        self.eliminated_cause = cause
        self.eliminated_on_turn = turn
        self.eliminated_by = by

    def clone(self) -> "Snake":
        return Snake(
            id=self.id,
            health=self.health,
            body=list(self.body),
            eliminated_cause=self.eliminated_cause,
            eliminated_on_turn=self.eliminated_on_turn,
            eliminated_by=self.eliminated_by,
        )


@dataclass(frozen=True)
class SnakeMove:
    """A requested move for one snake for the upcoming turn."""

    id: str
    move: str
