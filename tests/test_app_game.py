"""Tests for lanedash.ui.app_game — pygame event translation into movement intents."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

pygame = pytest.importorskip("pygame")

from lanedash.ui.app_game import handle_event
from lanedash.ui.controls import Controls

WIDTH = 400


def intents(controls):
    return controls.left_pressed, controls.right_pressed


class TestKeyboard:
    def test_hold_left_keys(self):
        for key in (pygame.K_LEFT, pygame.K_a):
            c = Controls()
            handle_event(c, pygame.event.Event(pygame.KEYDOWN, key=key), WIDTH)
            assert intents(c) == (True, False)

    def test_hold_right_keys(self):
        for key in (pygame.K_RIGHT, pygame.K_d):
            c = Controls()
            handle_event(c, pygame.event.Event(pygame.KEYDOWN, key=key), WIDTH)
            assert intents(c) == (False, True)

    def test_release_one_side(self):
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), WIDTH)
        handle_event(c, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d), WIDTH)
        handle_event(c, pygame.event.Event(pygame.KEYUP, key=pygame.K_d), WIDTH)
        assert intents(c) == (True, False)

    def test_other_keys_ignored(self):
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), WIDTH)
        assert intents(c) == (False, False)


class TestPointer:
    def test_mouse_press_halves(self):
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(50, 300), button=1), WIDTH)
        assert intents(c) == (True, False)
        handle_event(c, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(350, 300), button=1), WIDTH)
        assert intents(c) == (False, True)

    def test_drag_requires_button(self):
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 300), buttons=(0, 0, 0)), WIDTH)
        assert intents(c) == (False, False)
        handle_event(c, pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 300), buttons=(1, 0, 0)), WIDTH)
        assert intents(c) == (True, False)

    def test_finger_coordinates_are_normalized(self):
        """Finger x is a 0..1 fraction of the window width."""
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.FINGERDOWN, x=0.75, y=0.5), WIDTH)
        assert intents(c) == (False, True)
        handle_event(c, pygame.event.Event(pygame.FINGERMOTION, x=0.2, y=0.5), WIDTH)
        assert intents(c) == (True, False)

    def test_release_clears_both(self):
        c = Controls()
        handle_event(c, pygame.event.Event(pygame.FINGERDOWN, x=0.1, y=0.5), WIDTH)
        handle_event(c, pygame.event.Event(pygame.FINGERUP, x=0.1, y=0.5), WIDTH)
        assert intents(c) == (False, False)
        handle_event(c, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(350, 300), button=1), WIDTH)
        handle_event(c, pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(350, 300), button=1), WIDTH)
        assert intents(c) == (False, False)
