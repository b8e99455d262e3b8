# window.py
from collections import deque
from typing import Deque, Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT,
    Command, LETTER_COMMANDS,
    INSTRUCTIONS, GAME_OVER_TEXT, PROMPT_TEXT,
)
from .game import GameState

# ----- Layout: one board cell per CELL_SIZE square, text rows underneath -----
CELL_SIZE = 20
SCREEN_W = (WIDTH + 2) * CELL_SIZE
SCREEN_H = (HEIGHT + 6) * CELL_SIZE
FPS = 60

# ----- Colors -----
BG     = (20, 20, 24)
BORDER = (90, 90, 100)
GREEN  = (80, 200, 80)
HEAD   = (140, 255, 140)
RED    = (200, 70, 70)
TEXT   = (220, 220, 230)

ARROW_COMMANDS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.UP,
    pygame.K_DOWN: Command.DOWN,
}


def command_for_key(key: int) -> Optional[Command]:
    if key in ARROW_COMMANDS:
        return ARROW_COMMANDS[key]
    # pygame letter keycodes are their lowercase ASCII codes
    if 0 <= key < 256:
        return LETTER_COMMANDS.get(chr(key).lower())
    return None

def command_for_event(event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return command_for_key(event.key)
    return None

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


class WindowAdapter:
    """Same board as the terminal frontend, drawn into a pygame window."""

    def __init__(self, caption: str = "Snake"):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption(caption)
        self.font = pygame.font.SysFont(None, 24)
        self.clock = pygame.time.Clock()
        self.pending: Deque[Command] = deque()

    def close(self) -> None:
        pygame.quit()

    # ---- input ----
    def poll_key(self) -> Optional[Command]:
        for event in pygame.event.get():
            command = command_for_event(event)
            if command is not None:
                self.pending.append(command)
        return self.pending.popleft() if self.pending else None

    def wait_key(self) -> Command:
        self.pending.clear()
        while True:
            command = command_for_event(pygame.event.wait())
            if command in (Command.RESTART, Command.QUIT):
                return command

    # ---- clock ----
    def ticks_ms(self) -> int:
        return pygame.time.get_ticks()

    def idle(self) -> None:
        self.clock.tick(FPS)  # movement is gated by the loop, not the frame rate

    # ---- drawing ----
    def _text(self, msg: str, row: int) -> None:
        txt = self.font.render(msg, True, TEXT)
        self.screen.blit(txt, (8, row * CELL_SIZE))

    def _board(self, score: int) -> None:
        self.screen.fill(BG)
        for x in range(WIDTH + 2):
            draw_cell(self.screen, x, 0, BORDER)
            draw_cell(self.screen, x, HEIGHT + 1, BORDER)
        for y in range(HEIGHT + 2):
            draw_cell(self.screen, 0, y, BORDER)
            draw_cell(self.screen, WIDTH + 1, y, BORDER)
        self._text(f"Score: {score}", HEIGHT + 3)
        self._text(INSTRUCTIONS, HEIGHT + 4)

    def draw_static_board(self) -> None:
        self.pending.clear()
        self._board(0)
        pygame.display.flip()

    def draw_frame(self, state: GameState) -> None:
        self._board(state.score)
        # food
        draw_cell(self.screen, state.food[0], state.food[1], RED)
        # snake
        for x, y in state.snake.tail:
            draw_cell(self.screen, x, y, GREEN)
        draw_cell(self.screen, state.snake.head[0], state.snake.head[1], HEAD)
        pygame.display.flip()

    def draw_game_over(self, state: GameState) -> None:
        # Dim with translucent overlay
        overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render(GAME_OVER_TEXT, True, (240, 240, 250))
        sub   = self.font.render(PROMPT_TEXT, True, TEXT)
        sco   = self.font.render(f"Score: {state.score}", True, TEXT)

        mid_x = SCREEN_W // 2
        mid_y = (HEIGHT + 2) * CELL_SIZE // 2
        self.screen.blit(title, title.get_rect(center=(mid_x, mid_y - 16)))
        self.screen.blit(sub, sub.get_rect(center=(mid_x, mid_y + 16)))
        self.screen.blit(sco, sco.get_rect(center=(mid_x, mid_y + 44)))
        pygame.display.flip()
