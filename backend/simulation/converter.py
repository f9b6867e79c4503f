"""
Conversion between the wire board (JSON dicts) and BoardState.

Decoding ignores presentation-only fields; encoding synthesizes them and
drops eliminated snakes.
"""

from typing import Any, Dict, List

from domain.board_state import BoardState
from domain.constants import FUZZER_SNAKE_NAME, FUZZER_LATENCY_MS
from domain.snake import Point, Snake


def coords_to_points(coords: List[Dict[str, int]]) -> List[Point]:
    # Missing axes decode as 0, like every other absent wire field
    return [Point(coord.get("x", 0), coord.get("y", 0)) for coord in coords]


def point_to_coord(point: Point) -> Dict[str, int]:
    return {"x": point.x, "y": point.y}


def points_to_coords(points: List[Point]) -> List[Dict[str, int]]:
    return [point_to_coord(point) for point in points]


def decode_snake(snake: Dict[str, Any]) -> Snake:
    return Snake(
        id=snake.get("id", ""),
        health=snake.get("health", 0),
        body=coords_to_points(snake.get("body") or []),
    )


def decode_board(board: Dict[str, Any], turn: int = 0) -> BoardState:
    """
    Build a BoardState from a wire board.

    Args:
        board: wire board dict, already shape-checked by the request parser
        turn: turn counter for the new state

    Returns:
        A fresh BoardState.
    """
    return BoardState(
        width=board.get("width", 0),
        height=board.get("height", 0),
        food=coords_to_points(board.get("food") or []),
        hazards=coords_to_points(board.get("hazards") or []),
        snakes=[decode_snake(snake) for snake in board.get("snakes") or []],
        turn=turn,
    )


def encode_snake(snake: Snake) -> Dict[str, Any]:
    # An alive snake always has a body; body[0] failing here is a ruleset bug
    return {
        "id": snake.id,
        "name": FUZZER_SNAKE_NAME,
        "health": snake.health,
        "body": points_to_coords(snake.body),
        "latency": str(FUZZER_LATENCY_MS),
        "head": point_to_coord(snake.body[0]),
        "length": len(snake.body),
        "shout": "",
        "customizations": {"color": "", "head": "", "tail": ""},
    }


def encode_board(board_state: BoardState) -> Dict[str, Any]:
    """Build a wire board from a BoardState, leaving out eliminated snakes."""
    return {
        "height": board_state.height,
        "width": board_state.width,
        "food": points_to_coords(board_state.food),
        "hazards": points_to_coords(board_state.hazards),
        "snakes": [encode_snake(snake) for snake in board_state.snakes if snake.alive],
    }
