# loop.py
import logging
import random
from typing import Optional, Protocol

from .config import Command, TICK_MS
from .game import GameState, handle_command, step_game

logger = logging.getLogger(__name__)


class Adapter(Protocol):
    """Everything the game needs from a frontend: keys in, pixels or glyphs out."""

    def poll_key(self) -> Optional[Command]: ...
    def wait_key(self) -> Command: ...
    def draw_static_board(self) -> None: ...
    def draw_frame(self, state: GameState) -> None: ...
    def draw_game_over(self, state: GameState) -> None: ...
    def ticks_ms(self) -> int: ...
    def idle(self) -> None: ...


def drain_input(state: GameState, adapter: Adapter) -> None:
    """Apply every queued key; the last valid direction before a tick wins."""
    while True:
        command = adapter.poll_key()
        if command is None:
            return
        handle_command(state, command)
        if state.is_over:
            return


def run_playthrough(
    state: GameState,
    adapter: Adapter,
    rng: random.Random,
    interval_ms: int = TICK_MS,
) -> GameState:
    """
    Play until the state is over.

    Input is polled on every pass; update + draw run once per elapsed interval.
    Between passes the adapter gets a chance to pause briefly instead of spinning.
    """
    adapter.draw_static_board()
    last_tick = adapter.ticks_ms()

    while not state.is_over:
        # 1) input
        drain_input(state, adapter)
        if state.is_over:
            break

        # 2) update + render, gated on wall-clock time
        if adapter.ticks_ms() - last_tick >= interval_ms:
            step_game(state, rng)
            adapter.draw_frame(state)
            last_tick = adapter.ticks_ms()
        else:
            adapter.idle()

    logger.debug("playthrough loop left after %d ticks", state.ticks)
    return state
