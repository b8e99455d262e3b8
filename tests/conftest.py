from typing import List, Optional, Tuple

import pytest

from termsnake.config import Command
from termsnake.game import GameState


class FakeAdapter:
    """
    Scripted frontend with a manual clock.

    keys: (time_ms, command) pairs handed out by poll_key once the clock
          reaches time_ms.
    answers: what wait_key returns at each game over prompt.
    idle() moves the clock forward by step_ms.
    """

    def __init__(self, keys=(), answers=(Command.QUIT,), step_ms: int = 10, limit_ms: int = 60_000):
        self.keys: List[Tuple[int, Command]] = list(keys)
        self.answers: List[Command] = list(answers)
        self.step_ms = step_ms
        self.limit_ms = limit_ms
        self.now = 0
        self.frames: List[dict] = []
        self.frame_times: List[int] = []
        self.boards = 0
        self.game_overs: List[int] = []

    def poll_key(self) -> Optional[Command]:
        if self.keys and self.keys[0][0] <= self.now:
            return self.keys.pop(0)[1]
        return None

    def wait_key(self) -> Command:
        return self.answers.pop(0)

    def draw_static_board(self) -> None:
        self.boards += 1

    def draw_frame(self, state: GameState) -> None:
        self.frame_times.append(self.now)
        self.frames.append({
            "head": state.snake.head,
            "tail": list(state.snake.tail),
            "score": state.score,
            "direction": state.direction,
        })

    def draw_game_over(self, state: GameState) -> None:
        self.game_overs.append(state.score)

    def ticks_ms(self) -> int:
        return self.now

    def idle(self) -> None:
        self.now += self.step_ms
        if self.now > self.limit_ms:
            raise AssertionError("loop did not finish within the scripted time")


@pytest.fixture
def fake_adapter():
    return FakeAdapter
