import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

import config
from domain.errors import RequestDecodeError, SimulationError, RulesetNotFoundError
from simulation import create_next_board_state, decode_board, encode_board, parse_simulate_request

app = Flask(__name__)
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

CORS(app, resources={r"/simulate": {"origins": config.CORS_ALLOWED_ORIGINS}})

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def _client_error(message: str):
    return message, 400, TEXT_PLAIN


@app.route("/simulate", methods=["POST"])
def simulate():
    """
    Advance a board by one turn.

    Body: {"game": <snake request>, "moves": [{"id": ..., "move": ...}]}

    Returns:
    - 200: the wire board for the next turn
    - 400: plain text error if the body cannot be read or parsed, or the turn fails
    """
    try:
        body = request.get_data(cache=False)
    except (BadRequest, OSError) as error:
        logger.warning(f"Failed to read request body: {error}")
        return _client_error(f"Failed to read request body: {error}")

    logger.info(f"Request received {body.decode('utf-8', errors='replace')}")

    try:
        simulate_request = parse_simulate_request(body)
    except RequestDecodeError as error:
        logger.warning(f"Rejected simulate request: {error}")
        return _client_error(str(error))

    board_state = decode_board(simulate_request.board, turn=simulate_request.turn)

    try:
        next_state = create_next_board_state(
            board_state,
            simulate_request.moves,
            ruleset_name=simulate_request.ruleset_name,
            map_name=simulate_request.map_name,
            settings=simulate_request.settings,
        )
    except (SimulationError, RulesetNotFoundError) as error:
        logger.warning(f"Simulation failed on turn {board_state.turn}: {error}")
        return _client_error(str(error))

    return jsonify(encode_board(next_state))


if __name__ == "__main__":
    app.run(host=config.SIMULATOR_HOST, port=config.SIMULATOR_PORT, debug=config.FLASK_DEBUG)
