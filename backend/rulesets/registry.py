"""
Registry for named rulesets.

Maps ruleset names (e.g., 'standard', 'solo') to builders. To add a ruleset,
write a builder that assembles a PipelineRuleset from stages and add an
entry to RULESET_BUILDERS.
"""

from typing import Callable, Dict, Optional

from domain.errors import RulesetNotFoundError

from . import stages
from .base import PipelineRuleset, Ruleset
from .settings import Settings

STANDARD = "standard"
SOLO = "solo"
CONSTRICTOR = "constrictor"
WRAPPED = "wrapped"


def _build_standard(settings: Settings) -> Ruleset:
    return PipelineRuleset(STANDARD, [
        stages.game_over_standard,
        stages.move_snakes_standard,
        stages.reduce_snake_health,
        stages.damage_hazards_standard,
        stages.feed_snakes_standard,
        stages.eliminate_snakes_standard,
    ], settings)


def _build_solo(settings: Settings) -> Ruleset:
    return PipelineRuleset(SOLO, [
        stages.game_over_solo,
        stages.move_snakes_standard,
        stages.reduce_snake_health,
        stages.damage_hazards_standard,
        stages.feed_snakes_standard,
        stages.eliminate_snakes_standard,
    ], settings)


def _build_constrictor(settings: Settings) -> Ruleset:
    return PipelineRuleset(CONSTRICTOR, [
        stages.game_over_standard,
        stages.move_snakes_standard,
        stages.reduce_snake_health,
        stages.damage_hazards_standard,
        stages.feed_snakes_standard,
        stages.eliminate_snakes_standard,
        stages.remove_all_food,
        stages.grow_snakes_always,
    ], settings)


def _build_wrapped(settings: Settings) -> Ruleset:
    return PipelineRuleset(WRAPPED, [
        stages.game_over_standard,
        stages.move_snakes_wrapped,
        stages.reduce_snake_health,
        stages.damage_hazards_standard,
        stages.feed_snakes_standard,
        stages.eliminate_snakes_standard,
    ], settings)


RULESET_BUILDERS: Dict[str, Callable[[Settings], Ruleset]] = {
    STANDARD: _build_standard,
    SOLO: _build_solo,
    CONSTRICTOR: _build_constrictor,
    WRAPPED: _build_wrapped,
}

AVAILABLE_RULESETS = list(RULESET_BUILDERS.keys())


def get_ruleset(name: Optional[str] = None, settings: Optional[Settings] = None) -> Ruleset:
    """
    Build the ruleset registered under a name.

    Args:
        name: One of AVAILABLE_RULESETS. If None or empty, returns standard.
        settings: Settings for the ruleset; defaults when omitted.

    Returns:
        A Ruleset instance.

    Raises:
        RulesetNotFoundError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = STANDARD

    name = name.strip()

    if name not in RULESET_BUILDERS:
        available = ", ".join(AVAILABLE_RULESETS)
        raise RulesetNotFoundError(
            f"Unknown ruleset '{name}'. Available rulesets: {available}"
        )

    return RULESET_BUILDERS[name](settings or Settings())
