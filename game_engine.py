"""
Pure game logic for LANE DASH — no pygame dependency.
Used by the pygame frontend, the headless simulator and the batch runner.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

# ─────────────────────────────────────────
# Constants
# ─────────────────────────────────────────
WIDTH, HEIGHT = 400, 600
ROAD_WIDTH = 200
FPS = 60

LANE_COUNT = 3
SPAWN_Y = -50.0

CAR_W, CAR_H = 30, 50
CAR_BOTTOM_GAP = 70
CAR_SPEED = 5.0

OBS_W, OBS_H = 30, 40
COIN_RADIUS = 10
TREE_W, TREE_H = 40, 50

OBJECT_SPEED = 4.0   # obstacles + coins
TREE_SPEED = 3.0     # slower than the road for a depth cue

TREE_SPAWN_CHANCE = 0.05
OBSTACLE_SPAWN_CHANCE = 0.02
COIN_SPAWN_CHANCE = 0.03
COIN_REWARD = 10


# ─────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────

@dataclass(frozen=True)
class Playfield:
    width: float = WIDTH
    height: float = HEIGHT
    road_width: float = ROAD_WIDTH

    @property
    def shoulder(self) -> float:
        return (self.width - self.road_width) / 2

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.road_width <= 0:
            raise ValueError(
                f"Playfield sizes must be positive, got width={self.width}, "
                f"height={self.height}, road_width={self.road_width}"
            )
        if self.road_width >= self.width:
            raise ValueError(
                f"road_width must be < width (road_width={self.road_width}, width={self.width})"
            )
        if self.road_width < CAR_W:
            raise ValueError(
                f"road_width must fit the car (road_width={self.road_width}, car width={CAR_W})"
            )


@dataclass(frozen=True)
class Rules:
    tree_chance: float = TREE_SPAWN_CHANCE
    obstacle_chance: float = OBSTACLE_SPAWN_CHANCE
    coin_chance: float = COIN_SPAWN_CHANCE
    car_speed: float = CAR_SPEED
    object_speed: float = OBJECT_SPEED
    tree_speed: float = TREE_SPEED
    coin_reward: int = COIN_REWARD

    def validate(self) -> None:
        for name in ("tree_chance", "obstacle_chance", "coin_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")


# ─────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────

def lane_x(index, entity_width, playfield=Playfield()):
    """Left edge that centers an entity of `entity_width` in lane `index`."""
    if not 0 <= index < LANE_COUNT:
        raise IndexError(f"lane index {index} out of range 0..{LANE_COUNT - 1}")
    fraction = (2 * index + 1) / (2 * LANE_COUNT)  # 1/6, 1/2, 5/6
    return playfield.shoulder + playfield.road_width * fraction - entity_width / 2


def lane_positions(entity_width, playfield=Playfield()):
    return [lane_x(i, entity_width, playfield) for i in range(LANE_COUNT)]


def drive_bounds(entity_width, playfield=Playfield()):
    """Return (min_x, max_x) for an entity confined to the road."""
    return playfield.shoulder, playfield.width - playfield.shoulder - entity_width


def rects_overlap(a, b):
    """AABB test on (x, y, w, h) tuples. Touching edges do not overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def coin_collected(player_rect, coin):
    """Center-distance test between the player box and a coin."""
    px, py, pw, ph = player_rect
    cx, cy = coin.center()
    distance = math.hypot(px + pw / 2 - cx, py + ph / 2 - cy)
    return distance < pw / 2 + coin.radius


# ─────────────────────────────────────────
# Game objects
# ─────────────────────────────────────────

class Player:
    def __init__(self, playfield=Playfield()):
        self.x = playfield.width / 2 - CAR_W / 2
        self.y = float(playfield.height - CAR_BOTTOM_GAP)

    def steer(self, left_pressed, right_pressed, speed, playfield):
        """Right wins when both intents are held."""
        if right_pressed:
            self.x += speed
        elif left_pressed:
            self.x -= speed
        lo, hi = drive_bounds(CAR_W, playfield)
        self.x = max(lo, min(self.x, hi))

    def rect(self):
        """Return (x, y, w, h) tuple for collision detection."""
        return (self.x, self.y, CAR_W, CAR_H)


class Entity:
    """Anything that scrolls down the screen."""
    width = height = 0

    def __init__(self, x, y=SPAWN_Y):
        self.x = float(x)
        self.y = float(y)

    def update(self, speed):
        self.y += speed

    def gone(self, height):
        return self.y >= height


class Tree(Entity):
    width, height = TREE_W, TREE_H


class Obstacle(Entity):
    width, height = OBS_W, OBS_H

    def __init__(self, lane, playfield=Playfield(), y=SPAWN_Y):
        super().__init__(lane_x(lane, self.width, playfield), y)
        self.lane = lane

    def rect(self):
        return (self.x, self.y, self.width, self.height)


class Coin(Entity):
    radius = COIN_RADIUS
    width = height = 2 * COIN_RADIUS

    def __init__(self, lane, playfield=Playfield(), y=SPAWN_Y):
        super().__init__(lane_x(lane, self.width, playfield), y)
        self.lane = lane

    def center(self):
        return (self.x + self.radius, self.y + self.radius)


class GameState:
    def __init__(self, seed=None, playfield=None, rules=None):
        self.playfield = playfield or Playfield()
        self.rules = rules or Rules()
        self.playfield.validate()
        self.rules.validate()
        self.rng = random.Random(seed)
        self.reset()

    def reset(self):
        """Return to a clean running session. The RNG stream carries on."""
        self.player = Player(self.playfield)
        self.trees = []
        self.obstacles = []
        self.coins = []
        self.score = 0
        self.coins_collected = 0
        self.game_over = False
        self.frame = 0

    # ── Frame stages ─────────────────────

    def spawn(self):
        pf, rules, rng = self.playfield, self.rules, self.rng
        if rng.random() < rules.tree_chance:
            span = max(0.0, pf.shoulder - TREE_W)
            if rng.random() < 0.5:
                x = rng.random() * span
            else:
                x = pf.shoulder + pf.road_width + rng.random() * span
            self.trees.append(Tree(x))
        if rng.random() < rules.obstacle_chance:
            self.obstacles.append(Obstacle(rng.randint(0, LANE_COUNT - 1), pf))
        if rng.random() < rules.coin_chance:
            self.coins.append(Coin(rng.randint(0, LANE_COUNT - 1), pf))

    def advance(self):
        height = self.playfield.height
        for t in self.trees:
            t.update(self.rules.tree_speed)
        for o in self.obstacles:
            o.update(self.rules.object_speed)
        for c in self.coins:
            c.update(self.rules.object_speed)
        self.trees = [t for t in self.trees if not t.gone(height)]
        self.obstacles = [o for o in self.obstacles if not o.gone(height)]
        self.coins = [c for c in self.coins if not c.gone(height)]

    def check_obstacles(self):
        player_rect = self.player.rect()
        if any(rects_overlap(player_rect, o.rect()) for o in self.obstacles):
            self.game_over = True
        return self.game_over

    def collect_coins(self):
        player_rect = self.player.rect()
        kept = []
        for c in self.coins:
            if coin_collected(player_rect, c):
                self.score += self.rules.coin_reward
                self.coins_collected += 1
            else:
                kept.append(c)
        self.coins = kept

    def step(self, left_pressed=False, right_pressed=False):
        """Advance game by one frame. No-op once the session is over."""
        if self.game_over:
            return

        self.spawn()
        self.advance()
        if not self.check_obstacles():
            self.collect_coins()
            self.player.steer(left_pressed, right_pressed, self.rules.car_speed, self.playfield)
        self.frame += 1

    # ── Diagnostics ──────────────────────

    def encode(self):
        """Encode current state as dict for replay/diagnostics."""
        return {
            "x": self.player.x,
            "trees": [[t.x, t.y] for t in self.trees],
            "obs": [[o.lane, o.y / self.playfield.height] for o in self.obstacles],
            "coins": [[c.lane, c.y / self.playfield.height] for c in self.coins],
            "game_over": self.game_over,
            "score": self.score,
            "frame": self.frame,
        }

    def get_nearest_obstacles(self):
        """Return normalized distance to nearest obstacle in each lane. 1.0 = no obstacle."""
        distances = [1.0] * LANE_COUNT
        player_y = self.player.y
        for o in self.obstacles:
            if o.y < player_y:  # Only obstacles ahead (above player on screen)
                norm_dist = (player_y - o.y) / self.playfield.height
                if norm_dist < distances[o.lane]:
                    distances[o.lane] = norm_dist
        return distances

    def get_nearest_coins(self):
        """Same as get_nearest_obstacles, for coins."""
        distances = [1.0] * LANE_COUNT
        player_y = self.player.y
        for c in self.coins:
            if c.y < player_y:
                norm_dist = (player_y - c.y) / self.playfield.height
                if norm_dist < distances[c.lane]:
                    distances[c.lane] = norm_dist
        return distances


# ─────────────────────────────────────────
# Frame loop
# ─────────────────────────────────────────

def render_frame(renderer, state):
    """Issue the draw calls for one frame in fixed order."""
    renderer.draw_background()
    for t in state.trees:
        renderer.draw_scenery(t)
    renderer.draw_player(state.player.x, state.player.y)
    for o in state.obstacles:
        renderer.draw_obstacle(o)
    for c in state.coins:
        renderer.draw_coin(c)
    renderer.draw_score(state.score)


class FrameLoop:
    """One scheduler callback: step, draw, then ask for the next frame or stop."""

    def __init__(self, state, controls, request_frame, renderer=None, on_game_over=None):
        self.state = state
        self.controls = controls
        self.request_frame = request_frame
        self.renderer = renderer
        self.on_game_over = on_game_over

    def __call__(self):
        if self.state.game_over:
            return

        self.state.step(self.controls.left_pressed, self.controls.right_pressed)
        if self.renderer is not None:
            render_frame(self.renderer, self.state)

        if self.state.game_over:
            if self.on_game_over is not None:
                self.on_game_over(self.state.score)
            return
        self.request_frame(self)
