"""Key mapping and setup checks for the curses and pygame frontends."""

import curses

import pygame
import pytest

from termsnake import terminal, window
from termsnake.config import Command


class FakeScreen:
    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols

    def getmaxyx(self):
        return self.rows, self.cols


class TestTerminalKeys:

    @pytest.mark.parametrize("key, command", [
        (curses.KEY_LEFT, Command.LEFT),
        (curses.KEY_RIGHT, Command.RIGHT),
        (curses.KEY_UP, Command.UP),
        (curses.KEY_DOWN, Command.DOWN),
        (ord("a"), Command.LEFT),
        (ord("D"), Command.RIGHT),
        (ord("w"), Command.UP),
        (ord("S"), Command.DOWN),
        (ord("q"), Command.QUIT),
        (ord("R"), Command.RESTART),
    ])
    def test_known_keys(self, key, command):
        assert terminal.command_for_key(key) is command

    @pytest.mark.parametrize("key", [ord("x"), ord(" "), curses.KEY_RESIZE, -1])
    def test_other_keys_are_ignored(self, key):
        assert terminal.command_for_key(key) is None


class TestTerminalSize:

    def test_minimum_size_is_accepted(self):
        terminal.check_size(FakeScreen(rows=26, cols=42))

    @pytest.mark.parametrize("rows, cols", [(25, 42), (26, 41), (10, 10)])
    def test_too_small_is_rejected(self, rows, cols):
        with pytest.raises(terminal.TerminalTooSmall) as exc:
            terminal.check_size(FakeScreen(rows=rows, cols=cols))
        assert str(exc.value) == "Terminal too small! Need at least 42x26"
        assert (exc.value.cols, exc.value.rows) == (cols, rows)

    def test_adapter_checks_size_before_touching_curses(self):
        with pytest.raises(terminal.TerminalTooSmall):
            terminal.TerminalAdapter(FakeScreen(rows=5, cols=5))


class TestWindowKeys:

    @pytest.mark.parametrize("key, command", [
        (pygame.K_LEFT, Command.LEFT),
        (pygame.K_RIGHT, Command.RIGHT),
        (pygame.K_UP, Command.UP),
        (pygame.K_DOWN, Command.DOWN),
        (pygame.K_a, Command.LEFT),
        (pygame.K_d, Command.RIGHT),
        (pygame.K_w, Command.UP),
        (pygame.K_s, Command.DOWN),
        (pygame.K_q, Command.QUIT),
        (pygame.K_r, Command.RESTART),
    ])
    def test_known_keys(self, key, command):
        assert window.command_for_key(key) is command

    def test_other_keys_are_ignored(self):
        assert window.command_for_key(pygame.K_x) is None
        assert window.command_for_key(pygame.K_F1) is None

    def test_close_button_quits(self):
        event = pygame.event.Event(pygame.QUIT)
        assert window.command_for_event(event) is Command.QUIT

    def test_keydown_event(self):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)
        assert window.command_for_event(event) is Command.UP

    def test_other_events_are_ignored(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
        assert window.command_for_event(event) is None
