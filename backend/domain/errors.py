"""
Error taxonomy for the simulator.

Provider and phase errors carry the most recent BoardState so callers can
inspect how far a turn got before failing.
"""

from typing import Optional

from .board_state import BoardState


class SimulatorError(Exception):
    """Base class for all simulator errors."""


class RequestDecodeError(SimulatorError):
    """The inbound payload could not be parsed into a simulate request."""


class RulesetNotFoundError(SimulatorError):
    """No ruleset is registered under the requested name."""


class MapNotFoundError(SimulatorError):
    """No game map is registered under the requested name."""


class _StatefulError(SimulatorError):
    def __init__(self, message: str, board_state: Optional[BoardState] = None):
        super().__init__(message)
        self.board_state = board_state


class RulesetError(_StatefulError):
    """A ruleset failed while resolving moves."""


class MapError(_StatefulError):
    """A game map hook failed."""


class SimulationError(_StatefulError):
    """Advancing the board by one turn failed."""


class MapLoadError(SimulationError):
    pass


class PreUpdateError(SimulationError):
    pass


class ExecuteError(SimulationError):
    pass


class PostUpdateError(SimulationError):
    pass
