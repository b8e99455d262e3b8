from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Board (1-indexed, borders sit at 0 and WIDTH+1 / HEIGHT+1) -----
WIDTH, HEIGHT = 40, 20

# Rows below the board hold the score line and the instructions
MIN_COLS = WIDTH + 2
MIN_ROWS = HEIGHT + 6

# ----- Rules -----
POINTS_PER_FOOD = 10
TICK_MS = 100


# ----- Directions (dx, dy); y grows downwards -----
class Direction(Enum):
    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Command(Enum):
    """What a key press means to the game, independent of the frontend."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    QUIT = "quit"
    RESTART = "restart"


COMMAND_DIRECTIONS = {
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
}

# Letter keys shared by both frontends (arrow keys are mapped per frontend)
LETTER_COMMANDS = {
    "a": Command.LEFT,
    "d": Command.RIGHT,
    "w": Command.UP,
    "s": Command.DOWN,
    "q": Command.QUIT,
    "r": Command.RESTART,
}


class Phase(Enum):
    IDLE = "idle"          # waiting for the first direction
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ----- Text -----
INSTRUCTIONS = "Use WASD or Arrow keys. Press 'q' to quit."
GAME_OVER_TEXT = "GAME OVER"
PROMPT_TEXT = "Press 'r' to Restart or 'q' to Quit"


# ----- Tunables (what you'd set from the command line) -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    ui: str = "terminal"
    log_file: Optional[str] = None
    log_level: str = "INFO"
