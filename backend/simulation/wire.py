"""
Parsing of the JSON simulate request.

A request looks like:

    {
        "game": {
            "game": {"id": "...", "ruleset": {"name": "standard", "settings": {...}}, "map": "standard"},
            "turn": 3,
            "board": {"width": 11, "height": 11, "food": [{"x": 1, "y": 2}], "hazards": [], "snakes": [...]},
            "you": {...}
        },
        "moves": [{"id": "snake-1", "move": "up"}]
    }

Missing fields take zero values. Fields present with the wrong type are
rejected with a RequestDecodeError, as are board dimensions outside
0..MAX_BOARD_DIMENSION, so the converter can trust the board
it receives.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from domain.errors import RequestDecodeError
from domain.snake import SnakeMove
from rulesets.settings import Settings

# Maps scan every cell each turn, so board size is bounded
MAX_BOARD_DIMENSION = 255


@dataclass
class SimulateRequest:
    board: Dict[str, Any]
    moves: List[SnakeMove] = field(default_factory=list)
    turn: int = 0
    ruleset_name: Optional[str] = None
    map_name: Optional[str] = None
    settings: Settings = field(default_factory=Settings)


def _expect(value: Any, kind: type, where: str) -> Any:
    # bool is an int subclass; JSON true/false is never a valid coordinate or count
    if isinstance(value, bool) and kind is not bool:
        raise RequestDecodeError(f"{where}: expected {kind.__name__}, got bool")
    if not isinstance(value, kind):
        raise RequestDecodeError(f"{where}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _object(parent: Dict[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = parent.get(key)
    if value is None:
        return {}
    return _expect(value, dict, f"{where}.{key}")


def _list(parent: Dict[str, Any], key: str, where: str) -> List[Any]:
    value = parent.get(key)
    if value is None:
        return []
    return _expect(value, list, f"{where}.{key}")


def _int(parent: Dict[str, Any], key: str, where: str) -> int:
    return _expect(parent.get(key, 0), int, f"{where}.{key}")


def _str(parent: Dict[str, Any], key: str, where: str) -> str:
    return _expect(parent.get(key, ""), str, f"{where}.{key}")


def _validate_coords(parent: Dict[str, Any], key: str, where: str) -> None:
    for i, coord in enumerate(_list(parent, key, where)):
        coord_where = f"{where}.{key}[{i}]"
        _expect(coord, dict, coord_where)
        _int(coord, "x", coord_where)
        _int(coord, "y", coord_where)


def _dimension(board: Dict[str, Any], key: str, where: str) -> int:
    value = _int(board, key, where)
    if not 0 <= value <= MAX_BOARD_DIMENSION:
        raise RequestDecodeError(f"{where}.{key}: must be between 0 and {MAX_BOARD_DIMENSION}, got {value}")
    return value


def _validate_board(board: Dict[str, Any]) -> None:
    where = "game.board"
    _dimension(board, "width", where)
    _dimension(board, "height", where)
    _validate_coords(board, "food", where)
    _validate_coords(board, "hazards", where)
    for i, snake in enumerate(_list(board, "snakes", where)):
        snake_where = f"{where}.snakes[{i}]"
        _expect(snake, dict, snake_where)
        _str(snake, "id", snake_where)
        _int(snake, "health", snake_where)
        _validate_coords(snake, "body", snake_where)


def _parse_moves(payload: Dict[str, Any]) -> List[SnakeMove]:
    moves = []
    for i, raw in enumerate(_list(payload, "moves", "request")):
        where = f"request.moves[{i}]"
        _expect(raw, dict, where)
        moves.append(SnakeMove(id=_str(raw, "id", where), move=_str(raw, "move", where)))
    return moves


def parse_simulate_request(body: Union[bytes, str]) -> SimulateRequest:
    """
    Parse a raw request body into a SimulateRequest.

    Raises:
        RequestDecodeError: If the body is not valid JSON or has the wrong shape.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestDecodeError(str(e)) from e

    _expect(payload, dict, "request")

    snake_request = _object(payload, "game", "request")
    game = _object(snake_request, "game", "game")
    ruleset = _object(game, "ruleset", "game.game")
    board = _object(snake_request, "board", "game")
    _validate_board(board)

    ruleset_name = ruleset.get("name")
    if ruleset_name is not None:
        _expect(ruleset_name, str, "game.game.ruleset.name")
    map_name = game.get("map")
    if map_name is not None:
        _expect(map_name, str, "game.game.map")

    return SimulateRequest(
        board=board,
        moves=_parse_moves(payload),
        turn=_int(snake_request, "turn", "game"),
        ruleset_name=ruleset_name or None,
        map_name=map_name or None,
        settings=Settings.from_wire(ruleset.get("settings")),
    )
