"""
Rulesets resolve a turn of snake moves into movement, elimination and
food/hazard effects.
"""

from .settings import Settings
from .base import Ruleset, PipelineRuleset
from .registry import get_ruleset, AVAILABLE_RULESETS

__all__ = [
    'Settings',
    'Ruleset',
    'PipelineRuleset',
    'get_ruleset',
    'AVAILABLE_RULESETS',
]
