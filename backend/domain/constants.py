"""
Game constants for the turn simulator.
"""

# Movement directions (wire format is lowercase)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Snake defaults
SNAKE_MAX_HEALTH = 100

# Elimination causes
NOT_ELIMINATED = ""
ELIMINATED_BY_COLLISION = "snake-collision"
ELIMINATED_BY_SELF_COLLISION = "snake-self-collision"
ELIMINATED_BY_OUT_OF_HEALTH = "out-of-health"
ELIMINATED_BY_HEAD_TO_HEAD = "head-collision"
ELIMINATED_BY_OUT_OF_BOUNDS = "wall-collision"
ELIMINATED_BY_HAZARD = "hazard"

# Presentation fields synthesized when encoding snakes
FUZZER_SNAKE_NAME = "fuzzer"
FUZZER_LATENCY_MS = 0
