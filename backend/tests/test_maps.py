"""
Tests for the game maps and the map hook runners.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import BoardState, Point, Snake
from domain.errors import MapError, MapNotFoundError
from maps import AVAILABLE_MAPS, GameMap, get_map, post_update_board, pre_update_board
from maps.base import get_unoccupied_points
from rulesets.settings import Settings


def _board(food=(), hazards=(), turn=0, width=11, height=11):
    return BoardState(
        width=width,
        height=height,
        food=[Point(x, y) for x, y in food],
        hazards=[Point(x, y) for x, y in hazards],
        snakes=[Snake(id="a", health=100, body=[Point(5, 5), Point(5, 4), Point(5, 3)])],
        turn=turn,
    )


class TestRegistry:
    """Tests for get_map."""

    def test_available_maps(self):
        assert set(AVAILABLE_MAPS) == {"empty", "standard", "royale"}

    @pytest.mark.parametrize("name", ["empty", "standard", "royale"])
    def test_get_map_returns_map_with_matching_id(self, name):
        game_map = get_map(name)
        assert isinstance(game_map, GameMap)
        assert game_map.id() == name

    def test_unknown_map_raises(self):
        with pytest.raises(MapNotFoundError, match="Unknown map 'arcade'"):
            get_map("arcade")


class TestHookRunners:
    """Tests for pre_update_board / post_update_board."""

    def test_runners_return_a_copy(self):
        board = _board(food=[(1, 1)])
        snapshot = board.clone()

        after_pre = pre_update_board(get_map("empty"), board, Settings())
        after_post = post_update_board(get_map("empty"), board, Settings())

        assert after_pre == snapshot
        assert after_post == snapshot
        assert after_pre is not board
        assert after_post is not board

    def test_hook_edits_do_not_leak_into_input(self):
        class AddHazard(GameMap):
            def id(self):
                return "add-hazard"

            def pre_update_board(self, board_state, settings):
                board_state.hazards.append(Point(0, 0))

        board = _board()
        result = pre_update_board(AddHazard(), board, Settings())

        assert result.hazards == [Point(0, 0)]
        assert board.hazards == []

    def test_hook_failure_carries_edited_copy(self):
        game_map = Mock(spec=GameMap)
        game_map.id.return_value = "broken"

        def fail(board_state, settings):
            board_state.food.append(Point(9, 9))
            raise MapError("no room for food")

        game_map.post_update_board.side_effect = fail
        board = _board()

        with pytest.raises(MapError, match="no room for food") as exc_info:
            post_update_board(game_map, board, Settings())

        assert exc_info.value.board_state.food == [Point(9, 9)]
        assert board.food == []


class TestStandardMap:
    """Food spawning on the standard map."""

    def test_tops_up_to_minimum_food(self):
        board = _board(hazards=[(0, 0)])
        settings = Settings(minimum_food=3, food_spawn_chance=0, seed=1)

        result = post_update_board(get_map("standard"), board, settings)

        assert len(result.food) == 3
        assert len(set(result.food)) == 3
        blocked = set(board.snakes[0].body) | {Point(4, 5), Point(6, 5), Point(5, 6), Point(0, 0)}
        assert not blocked & set(result.food)
        assert all(result.in_bounds(food) for food in result.food)

    def test_no_spawn_when_minimum_met_and_no_chance(self):
        board = _board(food=[(1, 1)])
        result = post_update_board(get_map("standard"), board, Settings(minimum_food=1, food_spawn_chance=0))
        assert result.food == [Point(1, 1)]

    def test_certain_spawn_adds_one_food(self):
        board = _board(food=[(1, 1)])
        result = post_update_board(get_map("standard"), board, Settings(minimum_food=1, food_spawn_chance=100))
        assert len(result.food) == 2
        assert result.food[0] == Point(1, 1)

    def test_seeded_spawning_is_repeatable(self):
        settings = Settings(minimum_food=4, seed=99)
        first = post_update_board(get_map("standard"), _board(turn=7), settings)
        second = post_update_board(get_map("standard"), _board(turn=7), settings)
        assert first.food == second.food

    def test_full_board_places_what_fits(self):
        board = BoardState(width=1, height=1)
        result = post_update_board(get_map("standard"), board, Settings(minimum_food=5))
        assert result.food == [Point(0, 0)]

    def test_pre_update_is_a_no_op(self):
        board = _board(food=[(1, 1)])
        assert pre_update_board(get_map("standard"), board, Settings()) == board

    def test_unoccupied_points_options(self):
        board = _board(hazards=[(0, 0)])
        strict = set(get_unoccupied_points(board))
        loose = set(get_unoccupied_points(board, include_possible_moves=True, include_hazards=True))

        assert Point(0, 0) not in strict
        assert Point(5, 6) not in strict
        assert {Point(0, 0), Point(5, 6)} <= loose
        assert Point(5, 5) not in loose
        assert len(loose) == 11 * 11 - 3


class TestRoyaleMap:
    """Shrinking hazards on the royale map."""

    def test_no_hazards_before_first_shrink(self):
        board = _board(turn=24, hazards=[(3, 3)])
        settings = Settings(shrink_every_n_turns=25, seed=7, minimum_food=0, food_spawn_chance=0)

        result = post_update_board(get_map("royale"), board, settings)

        assert result.hazards == []

    def test_one_shrink_covers_one_edge(self):
        board = _board(turn=25)
        settings = Settings(shrink_every_n_turns=25, seed=7, minimum_food=0, food_spawn_chance=0)

        result = post_update_board(get_map("royale"), board, settings)

        assert len(result.hazards) == 11
        xs = {p.x for p in result.hazards}
        ys = {p.y for p in result.hazards}
        assert xs in ({0}, {10}) or ys in ({0}, {10})

    def test_shrinks_are_stable_across_turns(self):
        """Hazards from an earlier shrink stay in place on later turns."""
        settings = Settings(shrink_every_n_turns=5, seed=3, minimum_food=0, food_spawn_chance=0)
        royale = get_map("royale")

        earlier = post_update_board(royale, _board(turn=10), settings)
        later = post_update_board(royale, _board(turn=20), settings)

        assert set(earlier.hazards) <= set(later.hazards)
        assert len(later.hazards) > len(earlier.hazards)

    def test_huge_turn_covers_board_without_looping_forever(self):
        """Shrinks past width + height change nothing, so huge turns finish quickly."""
        royale = get_map("royale")
        settings = Settings(shrink_every_n_turns=1, seed=1, minimum_food=0, food_spawn_chance=0)

        result = post_update_board(royale, _board(turn=10 ** 9), settings)

        assert len(result.hazards) == 11 * 11
        assert set(result.hazards) == {Point(x, y) for x in range(11) for y in range(11)}

    def test_board_without_area_has_no_hazards(self):
        settings = Settings(shrink_every_n_turns=1, seed=1)
        result = post_update_board(get_map("royale"), _board(turn=50, width=0, height=0), settings)
        assert result.hazards == []
        assert result.food == []

    def test_invalid_shrink_interval_fails(self):
        board = _board(turn=25)
        with pytest.raises(MapError, match="shrink_every_n_turns") as exc_info:
            post_update_board(get_map("royale"), board, Settings(shrink_every_n_turns=0))
        assert exc_info.value.board_state is not None
