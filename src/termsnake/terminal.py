# terminal.py
import curses
import time
from typing import Optional

from .config import (
    WIDTH, HEIGHT, MIN_COLS, MIN_ROWS,
    Command, LETTER_COMMANDS,
    INSTRUCTIONS, GAME_OVER_TEXT, PROMPT_TEXT,
)
from .game import GameState

BORDER = "#"
FOOD = "F"
TAIL = "o"
HEAD = "O"

SCORE_ROW = HEIGHT + 3
HELP_ROW = HEIGHT + 4

ARROW_COMMANDS = {
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
}

# Short pause between input polls so the loop doesn't pin a core
POLL_SLEEP_S = 0.005


class TerminalTooSmall(Exception):
    def __init__(self, cols: int, rows: int):
        self.cols = cols
        self.rows = rows
        super().__init__(f"Terminal too small! Need at least {MIN_COLS}x{MIN_ROWS}")


def command_for_key(key: int) -> Optional[Command]:
    """Map a curses key code (arrows, WASD, q, r in either case) to a Command."""
    if key in ARROW_COMMANDS:
        return ARROW_COMMANDS[key]
    if 0 <= key < 256:
        return LETTER_COMMANDS.get(chr(key).lower())
    return None


def check_size(stdscr) -> None:
    rows, cols = stdscr.getmaxyx()
    if rows < MIN_ROWS or cols < MIN_COLS:
        raise TerminalTooSmall(cols, rows)


class TerminalAdapter:
    """Draws the board with curses; expects to live inside curses.wrapper()."""

    def __init__(self, stdscr):
        check_size(stdscr)
        self.stdscr = stdscr
        curses.curs_set(0)
        stdscr.keypad(True)
        stdscr.nodelay(True)

    # ---- input ----
    def poll_key(self) -> Optional[Command]:
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return None
            command = command_for_key(key)
            if command is not None:
                return command

    def wait_key(self) -> Command:
        self.stdscr.nodelay(False)
        try:
            while True:
                command = command_for_key(self.stdscr.getch())
                if command in (Command.RESTART, Command.QUIT):
                    return command
        finally:
            self.stdscr.nodelay(True)

    # ---- clock ----
    def ticks_ms(self) -> int:
        return int(time.monotonic() * 1000)

    def idle(self) -> None:
        time.sleep(POLL_SLEEP_S)

    # ---- drawing ----
    def _borders(self) -> None:
        for x in range(WIDTH + 2):
            self.stdscr.addstr(0, x, BORDER)
            self.stdscr.addstr(HEIGHT + 1, x, BORDER)
        for y in range(HEIGHT + 2):
            self.stdscr.addstr(y, 0, BORDER)
            self.stdscr.addstr(y, WIDTH + 1, BORDER)

    def draw_static_board(self) -> None:
        self.stdscr.clear()
        self._borders()
        self.stdscr.addstr(SCORE_ROW, 0, "Score: 0   ")
        self.stdscr.addstr(HELP_ROW, 0, INSTRUCTIONS)
        self.stdscr.refresh()

    def draw_frame(self, state: GameState) -> None:
        blank = " " * WIDTH
        for y in range(1, HEIGHT + 1):
            self.stdscr.addstr(y, 1, blank)

        fx, fy = state.food
        self.stdscr.addstr(fy, fx, FOOD)
        for x, y in state.snake.tail:
            self.stdscr.addstr(y, x, TAIL)
        # head last so it sits on top
        hx, hy = state.snake.head
        self.stdscr.addstr(hy, hx, HEAD)

        self.stdscr.addstr(SCORE_ROW, 0, f"Score: {state.score}   ")
        self.stdscr.refresh()

    def draw_game_over(self, state: GameState) -> None:
        self.stdscr.addstr(HEIGHT // 2, WIDTH // 2 - 4, GAME_OVER_TEXT)
        self.stdscr.addstr(HEIGHT // 2 + 2, (WIDTH + 2 - len(PROMPT_TEXT)) // 2, PROMPT_TEXT)
        self.stdscr.refresh()
