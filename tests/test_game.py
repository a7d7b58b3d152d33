import random

import pygame

from gridsnake import config
from gridsnake.__main__ import main
from gridsnake.game import run, tick
from gridsnake.grid import index
from gridsnake.state import Input, Status


class TestTick:
    def test_frame_zero_is_full_step_and_ignores_input(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)])
        new, frame, stepped = tick(state, Input.UP, 0)
        assert stepped
        assert new.head == index(8, 5)
        assert frame == 1

    def test_idle_frame_does_not_step(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)])
        new, frame, stepped = tick(state, Input.NONE, 7)
        assert not stepped
        assert new == state
        assert frame == 8

    def test_key_press_is_mid_step(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)])
        new, _, stepped = tick(state, Input.DOWN, 3)
        assert stepped
        assert new.head == index(7, 6)

    def test_frame_wraps_at_clock_minus_speed(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)])
        period = config.CLOCK_HZ - config.BASE_SPEED
        _, frame, _ = tick(state, Input.NONE, period - 1)
        assert frame == 0

    def test_faster_speed_shortens_period(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)], apples_eaten=50)
        period = config.CLOCK_HZ - config.BASE_SPEED - 50
        _, frame, _ = tick(state, Input.NONE, period - 1)
        assert frame == 0

    def test_slow_clock_steps_every_frame(self, make_state):
        state = make_state([(5, 5), (6, 5), (7, 5)])
        _, frame, _ = tick(state, Input.NONE, 0, clock_hz=100)
        assert frame == 0


class TestRun:
    def test_window_close_exits(self, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
        state = run(rng=random.Random(1))
        assert state.status == Status.EXITED

    def test_cli_prints_score(self, monkeypatch, capsys):
        monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
        main(["--seed", "1", "--log-level", "INFO"])
        assert "Game Over! Score:" in capsys.readouterr().out
