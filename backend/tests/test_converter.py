"""
Tests for simulation/converter.py - wire board <-> BoardState.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import BoardState, Point, Snake
from domain.constants import ELIMINATED_BY_COLLISION, ELIMINATED_BY_OUT_OF_HEALTH
from simulation.converter import decode_board, encode_board


def _wire_board():
    return {
        "height": 11,
        "width": 11,
        "food": [{"x": 5, "y": 5}, {"x": 9, "y": 0}, {"x": 2, "y": 6}],
        "hazards": [{"x": 0, "y": 0}, {"x": 0, "y": 1}],
        "snakes": [
            {
                "id": "snake-1",
                "name": "My Snake",
                "health": 54,
                "body": [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 2, "y": 0}],
                "latency": "111",
                "head": {"x": 0, "y": 0},
                "length": 3,
                "shout": "why are we shouting??",
                "customizations": {"color": "#FF0000", "head": "pixel", "tail": "pixel"},
            },
            {
                "id": "snake-2",
                "health": 16,
                "body": [{"x": 5, "y": 4}, {"x": 5, "y": 3}, {"x": 6, "y": 3}, {"x": 6, "y": 2}],
            },
        ],
    }


def _as_set(coords):
    return {(c["x"], c["y"]) for c in coords}


class TestDecodeBoard:
    """Tests for decode_board."""

    def test_decode_copies_dimensions_food_and_hazards(self):
        state = decode_board(_wire_board())

        assert state.width == 11
        assert state.height == 11
        assert state.food == [Point(5, 5), Point(9, 0), Point(2, 6)]
        assert state.hazards == [Point(0, 0), Point(0, 1)]
        assert state.turn == 0

    def test_decode_copies_snake_identity_health_and_body(self):
        state = decode_board(_wire_board())

        first, second = state.snakes
        assert first.id == "snake-1"
        assert first.health == 54
        assert first.body == [Point(0, 0), Point(1, 0), Point(2, 0)]
        assert first.alive
        assert second.id == "snake-2"
        assert len(second.body) == 4

    def test_decode_ignores_presentation_fields(self):
        """Snakes without name, head, latency etc. decode the same way."""
        board = _wire_board()
        stripped = dict(board)
        stripped["snakes"] = [
            {"id": s["id"], "health": s["health"], "body": s["body"]} for s in board["snakes"]
        ]
        assert decode_board(board) == decode_board(stripped)

    def test_decode_empty_lists(self):
        state = decode_board({"width": 3, "height": 4, "food": [], "hazards": [], "snakes": []})
        assert state == BoardState(width=3, height=4)

    def test_decode_missing_lists_are_empty(self):
        state = decode_board({"width": 3, "height": 4})
        assert state.food == []
        assert state.hazards == []
        assert state.snakes == []

    def test_decode_sets_turn(self):
        assert decode_board(_wire_board(), turn=42).turn == 42

    def test_decode_missing_axes_are_zero(self):
        """A coordinate missing x or y decodes that axis as 0."""
        board = {"width": 11, "height": 11, "food": [{"x": 1}], "hazards": [{"y": 4}, {}],
                 "snakes": [{"id": "a", "health": 100, "body": [{"x": 3}]}]}
        state = decode_board(board)

        assert state.food == [Point(1, 0)]
        assert state.hazards == [Point(0, 4), Point(0, 0)]
        assert state.snakes[0].body == [Point(3, 0)]


class TestEncodeBoard:
    """Tests for encode_board."""

    def test_round_trip_preserves_board(self):
        """encode(decode(board)) keeps dimensions, food, hazards and snakes."""
        board = _wire_board()
        encoded = encode_board(decode_board(board))

        assert encoded["width"] == board["width"]
        assert encoded["height"] == board["height"]
        assert _as_set(encoded["food"]) == _as_set(board["food"])
        assert _as_set(encoded["hazards"]) == _as_set(board["hazards"])
        assert [s["id"] for s in encoded["snakes"]] == ["snake-1", "snake-2"]
        for original, snake in zip(board["snakes"], encoded["snakes"]):
            assert snake["health"] == original["health"]
            assert snake["body"] == original["body"]

    def test_encode_synthesizes_presentation_fields(self):
        state = BoardState(
            width=11,
            height=11,
            snakes=[Snake(id="a", health=99, body=[Point(5, 6), Point(5, 5)])],
        )
        snake = encode_board(state)["snakes"][0]

        assert snake == {
            "id": "a",
            "name": "fuzzer",
            "health": 99,
            "body": [{"x": 5, "y": 6}, {"x": 5, "y": 5}],
            "latency": "0",
            "head": {"x": 5, "y": 6},
            "length": 2,
            "shout": "",
            "customizations": {"color": "", "head": "", "tail": ""},
        }

    def test_encode_drops_eliminated_snakes(self):
        """Eliminated snakes never appear in the wire board."""
        state = BoardState(
            width=11,
            height=11,
            snakes=[
                Snake(id="alive", health=50, body=[Point(1, 1)]),
                Snake(id="crashed", health=50, body=[Point(2, 2)], eliminated_cause=ELIMINATED_BY_COLLISION),
                Snake(id="starved", health=0, body=[], eliminated_cause=ELIMINATED_BY_OUT_OF_HEALTH),
            ],
        )
        encoded = encode_board(state)
        assert [s["id"] for s in encoded["snakes"]] == ["alive"]

    def test_encode_no_snakes_gives_empty_list(self):
        encoded = encode_board(BoardState(width=5, height=5))
        assert encoded == {"height": 5, "width": 5, "food": [], "hazards": [], "snakes": []}

    def test_encode_alive_snake_without_body_is_a_defect(self):
        state = BoardState(width=5, height=5, snakes=[Snake(id="broken", health=10, body=[])])
        with pytest.raises(IndexError):
            encode_board(state)
