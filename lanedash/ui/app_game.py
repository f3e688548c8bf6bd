#!/usr/bin/env python3
"""
LANE DASH — 2D lane-dodging arcade game
Avoid the road blocks, grab the coins.

Requirements:
    pip install pygame
"""

from __future__ import annotations

import pygame

from game_engine import FrameLoop, GameState
from lanedash.config.loader import load_settings
from lanedash.config.schema import Settings
from lanedash.ui.controls import Controls
from lanedash.ui.render import PygameRenderer, load_fonts

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class FrameScheduler:
    """Clock-driven stand-in for a display refresh callback queue."""

    def __init__(self, clock, fps):
        self.clock = clock
        self.fps = fps
        self._pending = None

    def request_frame(self, callback) -> None:
        self._pending = callback

    def run(self, on_event) -> bool:
        """Invoke pending callbacks until none is requested. False means quit."""
        while self._pending is not None:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if _is_quit(event):
                    return False
                on_event(event)
            callback, self._pending = self._pending, None
            callback()
            pygame.display.flip()
        return True


def _is_quit(event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def handle_event(controls: Controls, event, width: float) -> None:
    """Translate raw keyboard / pointer / touch events into movement intents."""
    if event.type == pygame.KEYDOWN:
        if event.key in LEFT_KEYS:
            controls.press(-1)
        elif event.key in RIGHT_KEYS:
            controls.press(1)
    elif event.type == pygame.KEYUP:
        if event.key in LEFT_KEYS:
            controls.release(-1)
        elif event.key in RIGHT_KEYS:
            controls.release(1)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        controls.touch(event.pos[0], width)
    elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
        controls.touch(event.pos[0], width)
    elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
        # Finger coordinates are normalized to [0, 1]
        controls.touch(event.x * width, width)
    elif event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
        controls.release_all()


def wait_for_restart(clock, renderer: PygameRenderer, score: int) -> bool:
    """Show the game-over overlay until a key/click (True) or quit (False)."""
    snapshot = renderer.screen.copy()
    blink = 0
    while True:
        clock.tick(30)
        blink += 1
        for event in pygame.event.get():
            if _is_quit(event):
                return False
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
                return True
        renderer.screen.blit(snapshot, (0, 0))
        renderer.draw_game_over(score, show_hint=blink % 30 < 21)
        pygame.display.flip()


def main(settings: Settings | None = None) -> int:
    settings = settings or load_settings()
    pf = settings.playfield

    pygame.init()
    screen = pygame.display.set_mode((int(pf.width), int(pf.height)))
    pygame.display.set_caption("LANE DASH")
    clock = pygame.time.Clock()

    renderer = PygameRenderer(screen, load_fonts(), pf)
    controls = Controls()
    scheduler = FrameScheduler(clock, settings.fps)
    state = GameState(seed=settings.seed, playfield=pf, rules=settings.rules)

    best = 0
    final = {}

    def on_game_over(score):
        final["score"] = score
        print(f"[play] Game over! Your score is: {score}")

    try:
        while True:
            final.clear()
            loop = FrameLoop(state, controls, scheduler.request_frame, renderer, on_game_over)
            loop()
            if not scheduler.run(lambda event: handle_event(controls, event, pf.width)):
                break

            score = final.get("score", state.score)
            best = max(best, score)
            if not wait_for_restart(clock, renderer, score):
                break
            state.reset()
            controls.release_all()
    finally:
        pygame.quit()

    print(f"[play] Best this run: {best}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
