# main.py
import argparse
import curses
import logging
import random
import sys
from typing import List, Optional

from .config import Config, Command, TICK_MS
from .game import new_game_state
from .loop import Adapter, run_playthrough
from .terminal import TerminalAdapter, TerminalTooSmall

logger = logging.getLogger(__name__)


def play(adapter: Adapter, rng: random.Random, tick_ms: int = TICK_MS) -> int:
    """Run playthroughs until the player quits at the game over prompt. Returns the last score."""
    games = 0
    while True:
        state = new_game_state(rng)
        games += 1
        logger.info("game %d: snake at %s, food at %s", games, state.snake.head, state.food)

        run_playthrough(state, adapter, rng, tick_ms)
        logger.info("game %d over with score %d", games, state.score)

        adapter.draw_game_over(state)
        if adapter.wait_key() is Command.QUIT:
            return state.score


def run_terminal(cfg: Config, rng: random.Random) -> int:
    return curses.wrapper(lambda stdscr: play(TerminalAdapter(stdscr), rng, cfg.tick_ms))


def run_window(cfg: Config, rng: random.Random) -> int:
    from .window import WindowAdapter

    adapter = WindowAdapter()
    try:
        return play(adapter, rng, cfg.tick_ms)
    finally:
        adapter.close()


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake with wraparound edges.")
    parser.add_argument(
        "--ui",
        type=str,
        default="terminal",
        choices=["terminal", "window"],
        help="terminal → curses in this terminal, window → pygame window",
    )
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds per game step")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="write logs here (nothing is logged to the screen while playing)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    return Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        ui=args.ui,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def setup_logging(cfg: Config) -> None:
    if cfg.log_file is None:
        return
    logging.basicConfig(
        filename=cfg.log_file,
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    setup_logging(cfg)
    logger.info("starting: %s", cfg)

    rng = random.Random(cfg.seed)
    runner = run_window if cfg.ui == "window" else run_terminal
    try:
        score = runner(cfg, rng)
    except TerminalTooSmall as exc:
        logger.error("terminal is %dx%d: %s", exc.cols, exc.rows, exc)
        print(exc, file=sys.stderr)
        return 1

    print(f"Thanks for playing! Final Score: {score}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
