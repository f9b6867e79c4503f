"""
Turn simulation pipeline: wire parsing, board conversion and the one-turn
advancer.
"""

from .advancer import create_next_board_state
from .converter import decode_board, encode_board
from .wire import SimulateRequest, parse_simulate_request

__all__ = [
    'create_next_board_state',
    'decode_board',
    'encode_board',
    'SimulateRequest',
    'parse_simulate_request',
]
