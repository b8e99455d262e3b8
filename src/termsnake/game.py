# game.py
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import logging
import random

from .config import (
    WIDTH, HEIGHT, POINTS_PER_FOOD,
    Direction, Command, Phase,
    OPPOSITE, COMMAND_DIRECTIONS,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ---------- Helpers ----------
def wrap(coord: int, lo: int, hi: int) -> int:
    """Moving past one edge reappears at the opposite edge. Assumes hi - lo >= 2."""
    if coord > hi:
        return lo
    if coord < lo:
        return hi
    return coord

def next_head(head: Position, direction: Direction) -> Position:
    dx, dy = direction.value
    return (wrap(head[0] + dx, 1, WIDTH), wrap(head[1] + dy, 1, HEIGHT))

def is_opposite(a: Direction, b: Direction) -> bool:
    return OPPOSITE.get(a) is b

def place_food(
    occupied: Callable[[Position], bool],
    rng: random.Random,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Position:
    """
    Pick a random free cell in [1, width] x [1, height].

    Random sampling stops after width * height tries; a single scan of the
    board then looks for whatever cell is left. On a full board the last
    sample is returned, occupied or not, so placement always terminates.
    """
    pos = (1, 1)
    for _ in range(width * height):
        pos = (rng.randint(1, width), rng.randint(1, height))
        if not occupied(pos):
            return pos

    for y in range(1, height + 1):
        for x in range(1, width + 1):
            if not occupied((x, y)):
                return (x, y)
    logger.warning("board is full, food placed on %s", pos)
    return pos


# ---------- Snake ----------
class Snake:
    """Head plus an ordered tail; tail[0] is the segment right behind the head."""

    def __init__(self, head: Position, tail: Optional[List[Position]] = None):
        self.head = head
        self.tail: List[Position] = list(tail) if tail else []
        self._vacated: Optional[Position] = None

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def occupies(self, pos: Position) -> bool:
        return pos == self.head or pos in self.tail

    def advance(self, new_head: Position) -> None:
        # The tail has to pick up the old head before the head moves
        old_head = self.head
        if self.tail:
            self._vacated = self.tail[-1]
            for i in range(len(self.tail) - 1, 0, -1):
                self.tail[i] = self.tail[i - 1]
            self.tail[0] = old_head
        else:
            self._vacated = old_head
        self.head = new_head

    def grow(self) -> None:
        """
        Add one segment at the cell the last advance() left behind.

        The next advance() overwrites it through the normal shift, so the
        exact value only matters until then (for drawing and food placement).
        """
        if self._vacated is None:
            self._vacated = self.tail[-1] if self.tail else self.head
        self.tail.append(self._vacated)
        self._vacated = None

    def self_collides(self, pos: Position) -> bool:
        return pos in self.tail


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Position
    direction: Direction = Direction.NONE
    score: int = 0
    phase: Phase = Phase.IDLE
    quit_requested: bool = False
    ticks: int = field(default=0, repr=False)

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

def new_game_state(rng: random.Random) -> GameState:
    snake = Snake((WIDTH // 2, HEIGHT // 2))
    food = place_food(snake.occupies, rng)
    return GameState(snake=snake, food=food)


# ---------- Input / Update ----------
def change_direction(state: GameState, direction: Direction) -> bool:
    """Set the direction for the next tick unless it reverses the current one."""
    if state.is_over or direction is Direction.NONE:
        return False
    if is_opposite(direction, state.direction):
        return False
    state.direction = direction
    if state.phase is Phase.IDLE:
        state.phase = Phase.PLAYING
        logger.info("playthrough started heading %s", direction.name)
    return True

def handle_command(state: GameState, command: Command) -> None:
    if command is Command.QUIT:
        state.quit_requested = True
        state.phase = Phase.GAME_OVER
        logger.info("quit requested at score %d", state.score)
    elif command in COMMAND_DIRECTIONS:
        change_direction(state, COMMAND_DIRECTIONS[command])
    # RESTART only means something at the game over prompt

def step_game(state: GameState, rng: random.Random) -> None:
    """
    Advance the game by one tick.
    - Nothing moves before the first direction or after game over.
    - Colliding with the tail ends the game before any food is eaten.
    """
    if state.direction is Direction.NONE or state.is_over:
        return
    state.ticks += 1

    snake = state.snake
    new_head = next_head(snake.head, state.direction)
    will_eat = new_head == state.food

    snake.advance(new_head)

    if snake.self_collides(new_head):
        state.phase = Phase.GAME_OVER
        logger.info("snake hit its tail at %s after %d ticks, score %d",
                    new_head, state.ticks, state.score)
        return

    if will_eat:
        state.score += POINTS_PER_FOOD
        snake.grow()
        state.food = place_food(snake.occupies, rng)
        logger.debug("ate food at %s, score %d, next food %s", new_head, state.score, state.food)
