"""
Ruleset settings shared by rulesets and maps.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.errors import RequestDecodeError

DEFAULT_FOOD_SPAWN_CHANCE = 15
DEFAULT_MINIMUM_FOOD = 1
DEFAULT_HAZARD_DAMAGE_PER_TURN = 14
DEFAULT_SHRINK_EVERY_N_TURNS = 25


def _int_setting(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    # bool is an int subclass but never a valid setting
    if isinstance(value, bool) or not isinstance(value, int):
        raise RequestDecodeError(f"ruleset setting '{key}' must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Tunable values for a game.

    Attributes:
        food_spawn_chance: percent chance of spawning one food per turn
        minimum_food: food count the board is topped up to each turn
        hazard_damage_per_turn: health lost by a snake whose head is on a hazard
        shrink_every_n_turns: royale map shrink interval
        seed: base seed for map randomness; None means nondeterministic
    """

    food_spawn_chance: int = DEFAULT_FOOD_SPAWN_CHANCE
    minimum_food: int = DEFAULT_MINIMUM_FOOD
    hazard_damage_per_turn: int = DEFAULT_HAZARD_DAMAGE_PER_TURN
    shrink_every_n_turns: int = DEFAULT_SHRINK_EVERY_N_TURNS
    seed: Optional[int] = None

    def get_rand(self, turn: int) -> random.Random:
        """Return a random source for the given turn, seeded when a seed is set."""
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed + turn)

    @classmethod
    def from_wire(cls, raw: Optional[Dict[str, Any]]) -> "Settings":
        """
        Build Settings from the camelCase ruleset settings of a game request.

        Missing keys fall back to the defaults.

        Raises:
            RequestDecodeError: If the settings are not an object or hold wrong types.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise RequestDecodeError(f"ruleset settings must be an object, got {raw!r}")

        royale = raw.get("royale") or {}
        if not isinstance(royale, dict):
            raise RequestDecodeError(f"royale settings must be an object, got {royale!r}")

        seed = raw.get("seed")
        if seed is not None:
            seed = _int_setting(raw, "seed", 0)

        return cls(
            food_spawn_chance=_int_setting(raw, "foodSpawnChance", DEFAULT_FOOD_SPAWN_CHANCE),
            minimum_food=_int_setting(raw, "minimumFood", DEFAULT_MINIMUM_FOOD),
            hazard_damage_per_turn=_int_setting(raw, "hazardDamagePerTurn", DEFAULT_HAZARD_DAMAGE_PER_TURN),
            shrink_every_n_turns=_int_setting(royale, "shrinkEveryNTurns", DEFAULT_SHRINK_EVERY_N_TURNS),
            seed=seed,
        )
