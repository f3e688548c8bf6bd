from __future__ import annotations

"""Pygame drawing for LANE DASH. Pure presentation: reads entities, never mutates them."""

import pygame

from game_engine import CAR_W, CAR_H, OBS_W, OBS_H, Playfield

C_GRASS = (139, 195, 74)
C_ROAD = (66, 66, 66)
C_LINE = (255, 255, 255)
C_TRUNK = (121, 85, 72)
C_LEAVES = (76, 175, 80)
C_CAR = (255, 0, 0)
C_GLASS = (255, 255, 255)
C_LIGHT = (255, 255, 0)
C_WHEEL = (0, 0, 0)
C_OBS = (139, 0, 0)
C_WARN = (255, 255, 0)
C_COIN = (255, 215, 0)
C_SHINE = (255, 255, 255, 180)
C_WHITE = (255, 255, 255)
C_DIM = (200, 200, 200)

DASH_LEN = 10


class PygameRenderer:
    def __init__(self, screen, fonts: dict, playfield: Playfield):
        self.screen = screen
        self.fonts = fonts
        self.playfield = playfield

    def draw_background(self) -> None:
        pf = self.playfield
        w, h = int(pf.width), int(pf.height)
        self.screen.fill(C_GRASS)
        pygame.draw.rect(self.screen, C_ROAD, (int(pf.shoulder), 0, int(pf.road_width), h))

        # Dashed center line
        cx = w // 2
        for y in range(0, h, DASH_LEN * 2):
            pygame.draw.line(self.screen, C_LINE, (cx, y), (cx, y + DASH_LEN), 4)

    def draw_scenery(self, tree) -> None:
        x, y = int(tree.x), int(tree.y)
        pygame.draw.rect(self.screen, C_TRUNK, (x + 10, y + 30, 10, 20))
        pygame.draw.circle(self.screen, C_LEAVES, (x + 15, y + 30), 20)

    def draw_player(self, x, y) -> None:
        x, y = int(x), int(y)
        w, h = CAR_W, CAR_H
        pygame.draw.rect(self.screen, C_CAR, (x, y, w, h))
        pygame.draw.rect(self.screen, C_GLASS, (x + int(w * 0.1), y + int(h * 0.1), int(w * 0.8), int(h * 0.3)))
        pygame.draw.rect(self.screen, C_LIGHT, (x + 2, y + h - 8, 8, 5))
        pygame.draw.rect(self.screen, C_LIGHT, (x + w - 10, y + h - 8, 8, 5))
        for wy in (y + 5, y + 35):
            pygame.draw.rect(self.screen, C_WHEEL, (x - 5, wy, 5, 10))
            pygame.draw.rect(self.screen, C_WHEEL, (x + w, wy, 5, 10))

    def draw_obstacle(self, obstacle) -> None:
        x, y = int(obstacle.x), int(obstacle.y)
        pygame.draw.rect(self.screen, C_OBS, (x, y, OBS_W, OBS_H))
        mark = self.fonts["warn"].render("!", True, C_WARN)
        self.screen.blit(mark, mark.get_rect(center=(x + OBS_W // 2, y + OBS_H // 2)))

    def draw_coin(self, coin) -> None:
        cx, cy = (int(v) for v in coin.center())
        pygame.draw.circle(self.screen, C_COIN, (cx, cy), coin.radius)
        shine = pygame.Surface((10, 5), pygame.SRCALPHA)
        pygame.draw.ellipse(shine, C_SHINE, (0, 0, 10, 5))
        self.screen.blit(shine, (cx - 2, cy - 5))

    def draw_score(self, score) -> None:
        sc = self.fonts["score"].render(f"SCORE: {score}", True, C_WHITE)
        self.screen.blit(sc, (10, 10))

    def draw_game_over(self, score, show_hint=True) -> None:
        w, h = int(self.playfield.width), int(self.playfield.height)
        dim = pygame.Surface((w, h), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 155))
        self.screen.blit(dim, (0, 0))

        t = self.fonts["title"].render("GAME OVER", True, C_WHITE)
        self.screen.blit(t, (w // 2 - t.get_width() // 2, h // 2 - 80))
        sc = self.fonts["score"].render(f"Your score: {score}", True, C_WHITE)
        self.screen.blit(sc, (w // 2 - sc.get_width() // 2, h // 2 - 20))
        if show_hint:
            hint = self.fonts["sub"].render("press any key to restart", True, C_DIM)
            self.screen.blit(hint, (w // 2 - hint.get_width() // 2, h // 2 + 30))


def load_fonts() -> dict:
    try:
        return {
            "score": pygame.font.SysFont("Arial", 20),
            "warn": pygame.font.SysFont("Arial", 25, bold=True),
            "title": pygame.font.SysFont("Arial", 44, bold=True),
            "sub": pygame.font.SysFont("Arial", 16),
        }
    except Exception:
        return {
            "score": pygame.font.SysFont(None, 24),
            "warn": pygame.font.SysFont(None, 30),
            "title": pygame.font.SysFont(None, 52),
            "sub": pygame.font.SysFont(None, 20),
        }
