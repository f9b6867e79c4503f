"""
Stage functions used to build rulesets.

Each stage receives the board being built for the next turn and mutates it
in place. A stage returns True when it decides the game is over.
"""

from typing import List, Optional, Sequence, Tuple

from domain.board_state import BoardState
from domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    SNAKE_MAX_HEALTH,
    ELIMINATED_BY_COLLISION,
    ELIMINATED_BY_SELF_COLLISION,
    ELIMINATED_BY_OUT_OF_HEALTH,
    ELIMINATED_BY_HEAD_TO_HEAD,
    ELIMINATED_BY_OUT_OF_BOUNDS,
    ELIMINATED_BY_HAZARD,
)
from domain.errors import RulesetError
from domain.snake import Point, Snake, SnakeMove

from .settings import Settings

ERROR_ZERO_LENGTH_SNAKE = "snake is length zero"
ERROR_NO_MOVE_FOUND = "move not found for snake"
ERROR_NO_BOARD_AREA = "cannot wrap snakes on a board with no area"

DIRECTION_VECTORS = {
    UP: (0, 1),      # Up => y + 1
    DOWN: (0, -1),   # Down => y - 1
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}


def is_initialization(moves: Sequence[SnakeMove]) -> bool:
    """An empty move list sets a board up rather than advancing snakes."""
    return len(moves) == 0


def find_move(snake_id: str, moves: Sequence[SnakeMove]) -> Optional[str]:
    # First move for a snake wins when the list repeats an id
    for move in moves:
        if move.id == snake_id:
            return move.move
    return None


def get_default_move(body: List[Point]) -> str:
    """Continue in the direction the snake is already heading, or up."""
    if len(body) < 2:
        return UP
    head, neck = body[0], body[1]
    if head.x == neck.x + 1:
        return RIGHT
    if head.x == neck.x - 1:
        return LEFT
    if head.y == neck.y - 1:
        return DOWN
    return UP


def next_head(snake: Snake, move: str) -> Point:
    if move not in DIRECTION_VECTORS:
        move = get_default_move(snake.body)
    dx, dy = DIRECTION_VECTORS[move]
    return Point(snake.head.x + dx, snake.head.y + dy)


def grow_snake(snake: Snake) -> None:
    if snake.body:
        snake.body.append(snake.body[-1])


def feed_snake(snake: Snake) -> None:
    grow_snake(snake)
    snake.health = SNAKE_MAX_HEALTH


# ---------------------------------------------------------------------------
# Game over
# ---------------------------------------------------------------------------

def game_over_standard(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    return len(board.alive_snakes()) <= 1


def game_over_solo(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    return len(board.alive_snakes()) == 0


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

def move_snakes_standard(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    if is_initialization(moves):
        return False

    # Validate every snake before moving any of them
    planned: List[Tuple[Snake, str]] = []
    for snake in board.snakes:
        if not snake.alive:
            continue
        if len(snake.body) == 0:
            raise RulesetError(f"{ERROR_ZERO_LENGTH_SNAKE}: {snake.id}")
        move = find_move(snake.id, moves)
        if move is None:
            raise RulesetError(f"{ERROR_NO_MOVE_FOUND}: {snake.id}")
        planned.append((snake, move))

    for snake, move in planned:
        snake.body = [next_head(snake, move)] + snake.body[:-1]

    return False


def move_snakes_wrapped(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    if board.width <= 0 or board.height <= 0:
        raise RulesetError(f"{ERROR_NO_BOARD_AREA}: {board.width}x{board.height}")

    move_snakes_standard(board, settings, moves)
    if is_initialization(moves):
        return False

    for snake in board.alive_snakes():
        head = snake.body[0]
        snake.body[0] = Point(head.x % board.width, head.y % board.height)

    return False


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

def reduce_snake_health(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    if is_initialization(moves):
        return False

    for snake in board.alive_snakes():
        snake.health -= 1

    return False


def damage_hazards_standard(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    if is_initialization(moves):
        return False

    food = set(board.food)
    for snake in board.alive_snakes():
        if not snake.body:
            continue
        head = snake.head
        # Food on the same cell cancels hazard damage
        if head in food:
            continue
        # Stacked hazards damage once per entry
        for hazard in board.hazards:
            if hazard != head:
                continue
            snake.health = max(0, snake.health - settings.hazard_damage_per_turn)
            if snake.health <= 0:
                snake.eliminate(ELIMINATED_BY_HAZARD, board.turn + 1)
                break

    return False


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

def feed_snakes_standard(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    remaining_food: List[Point] = []
    for food in board.food:
        eaten = False
        # Every snake whose head is on the cell eats the same food
        for snake in board.alive_snakes():
            if snake.body and snake.head == food:
                feed_snake(snake)
                eaten = True
        if not eaten:
            remaining_food.append(food)

    board.food = remaining_food
    return False


def remove_all_food(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    board.food = []
    return False


def grow_snakes_always(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    if is_initialization(moves):
        return False

    for snake in board.alive_snakes():
        feed_snake(snake)

    return False


# ---------------------------------------------------------------------------
# Elimination
# ---------------------------------------------------------------------------

def _has_body_collided(snake: Snake, other: Snake) -> bool:
    return snake.head in other.body[1:]


def _has_lost_head_to_head(snake: Snake, other: Snake) -> bool:
    return snake.head == other.head and len(snake.body) <= len(other.body)


def eliminate_snakes_standard(board: BoardState, settings: Settings, moves: Sequence[SnakeMove]) -> bool:
    eliminated_turn = board.turn + 1

    # a) health and walls, applied immediately
    for snake in board.alive_snakes():
        if len(snake.body) == 0:
            raise RulesetError(f"{ERROR_ZERO_LENGTH_SNAKE}: {snake.id}")
        if snake.health <= 0:
            snake.eliminate(ELIMINATED_BY_OUT_OF_HEALTH, eliminated_turn)
            continue
        if any(not board.in_bounds(point) for point in snake.body):
            snake.eliminate(ELIMINATED_BY_OUT_OF_BOUNDS, eliminated_turn)

    # b) collisions between the survivors, applied together
    survivors = board.alive_snakes()
    collisions: List[Tuple[Snake, str, str]] = []
    for snake in survivors:
        if _has_body_collided(snake, snake):
            collisions.append((snake, ELIMINATED_BY_SELF_COLLISION, snake.id))
            continue

        body_hit = next(
            (other for other in survivors if other.id != snake.id and _has_body_collided(snake, other)),
            None,
        )
        if body_hit is not None:
            collisions.append((snake, ELIMINATED_BY_COLLISION, body_hit.id))
            continue

        head_hit = next(
            (other for other in survivors if other.id != snake.id and _has_lost_head_to_head(snake, other)),
            None,
        )
        if head_hit is not None:
            collisions.append((snake, ELIMINATED_BY_HEAD_TO_HEAD, head_hit.id))

    for snake, cause, by in collisions:
        snake.eliminate(cause, eliminated_turn, by)

    return False
