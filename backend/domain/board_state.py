"""
BoardState entity - a snapshot of the board at a point in time.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .snake import Point, Snake


@dataclass
class BoardState:
    """
    A snapshot of the board at a specific turn.

    Attributes:
        width, height: board dimensions, fixed for the lifetime of the state
        food: list of Points holding food
        hazards: list of hazard Points (may repeat when hazards stack)
        snakes: ordered list of Snakes, eliminated ones included
        turn: turn counter
    """

    width: int
    height: int
    food: List[Point] = field(default_factory=list)
    hazards: List[Point] = field(default_factory=list)
    snakes: List[Snake] = field(default_factory=list)
    turn: int = 0

    def clone(self) -> "BoardState":
        """Return a deep copy that can be modified without touching this state."""
        return BoardState(
            width=self.width,
            height=self.height,
            food=list(self.food),
            hazards=list(self.hazards),
            snakes=[snake.clone() for snake in self.snakes],
            turn=self.turn,
        )

    def get_snake(self, snake_id: str) -> Optional[Snake]:
        for snake in self.snakes:
            if snake.id == snake_id:
                return snake
        return None

    def alive_snakes(self) -> List[Snake]:
        return [snake for snake in self.snakes if snake.alive]

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        T = snake body
        0,1,2... = snake head (showing snake index)
        (0,0) is at the bottom left with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for x, y in self.hazards:
            if self.in_bounds(Point(x, y)):
                board[y][x] = 'H'

        for x, y in self.food:
            if self.in_bounds(Point(x, y)):
                board[y][x] = 'F'

        for i, snake in enumerate(self.snakes):
            if not snake.alive:
                continue
            for pos_idx, point in enumerate(snake.body):
                if not self.in_bounds(point):
                    continue
                board[point.y][point.x] = str(i) if pos_idx == 0 else 'T'

        result = []
        # Rows bottom to top
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")
        result.append("   " + " ".join(str(i) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<BoardState turn={self.turn}, size={self.width}x{self.height}, "
            f"food={len(self.food)}, hazards={len(self.hazards)}, "
            f"snakes={len(self.alive_snakes())}/{len(self.snakes)}>"
        )
