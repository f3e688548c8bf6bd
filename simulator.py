#!/usr/bin/env python3
"""Headless game simulator — runs a session with an autopilot policy, records replay data."""

from collections import deque

from game_engine import CAR_W, LANE_COUNT, FrameLoop, GameState, lane_positions
from lanedash.ui.controls import Controls

# Safety limit: stop if game exceeds this many frames (~3 minutes at 60fps)
MAX_FRAMES = 12_000


class SteeringFilter:
    """Prevents jittery lane switching by requiring a consistent target before changing."""

    def __init__(self, min_hold=3):
        self.current_lane = 1
        self.hold_counter = 0
        self.min_hold = min_hold

    def filter(self, raw_lane, min_dist=1.0):
        # Emergency override: if closest obstacle < 0.15, switch immediately
        if min_dist < 0.15:
            self.current_lane = raw_lane
            self.hold_counter = 0
            return raw_lane

        if raw_lane != self.current_lane:
            self.hold_counter += 1
            if self.hold_counter >= self.min_hold:
                self.current_lane = raw_lane
                self.hold_counter = 0
                return raw_lane
            return self.current_lane  # hold previous target
        else:
            self.hold_counter = 0
            return raw_lane


class IdlePolicy:
    """Never touches the controls."""

    name = "idle"

    def decide(self, game):
        return False, False


class AutopilotPolicy:
    """Steer toward the lane whose nearest obstacle is farthest away, preferring coins on ties."""

    name = "autopilot"

    def __init__(self, min_hold=3):
        self.filter = SteeringFilter(min_hold=min_hold)

    def pick_lane(self, game):
        obstacles = game.get_nearest_obstacles()
        coins = game.get_nearest_coins()
        # Larger obstacle distance first, then closer coin, then the middle lane
        return max(
            range(LANE_COUNT),
            key=lambda lane: (round(obstacles[lane], 2), -coins[lane], -abs(lane - 1)),
        )

    def decide(self, game):
        nearest = game.get_nearest_obstacles()
        lane = self.filter.filter(self.pick_lane(game), min(nearest))
        target_x = lane_positions(CAR_W, game.playfield)[lane]
        dx = target_x - game.player.x
        if abs(dx) < game.rules.car_speed / 2:
            return False, False
        return dx < 0, dx > 0


_POLICIES = {
    "autopilot": AutopilotPolicy,
    "idle": IdlePolicy,
}


def load_policy(name):
    try:
        return _POLICIES[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown policy: {name!r}. Expected one of {sorted(_POLICIES)}") from exc


def available_policies():
    return sorted(_POLICIES)


def simulate(policy, seed=0, settings=None):
    """
    Run one headless game session.

    Args:
        policy: object with decide(game) -> (left_pressed, right_pressed)
        seed: random seed for deterministic replay
        settings: optional lanedash Settings; engine defaults otherwise

    Returns:
        dict: {
            'alive_time': int (frames survived),
            'score': int,
            'coins': int,
            'seed': int,
            'frames': list of frame dicts for replay
        }

    Each frame dict contains the output of GameState.encode() plus a
    'decision' key with the policy's intents as [left, right].
    """
    if settings is not None:
        game = GameState(seed=seed, playfield=settings.playfield, rules=settings.rules)
        max_frames = settings.max_frames
    else:
        game = GameState(seed=seed)
        max_frames = MAX_FRAMES

    intents = Controls()
    frames = []
    pending = deque()
    loop = FrameLoop(game, intents, pending.append)

    pending.append(loop)
    while pending and game.frame < max_frames:
        intents.left_pressed, intents.right_pressed = policy.decide(game)

        # Record every other frame for replay (keeps data manageable)
        if game.frame % 2 == 0:
            state = game.encode()
            state["decision"] = [intents.left_pressed, intents.right_pressed]
            frames.append(state)

        pending.popleft()()

    # Record final frame on game over
    if frames and frames[-1].get("frame") != game.frame:
        final = game.encode()
        final["decision"] = [intents.left_pressed, intents.right_pressed]
        frames.append(final)

    return {
        "alive_time": game.frame,
        "score": game.score,
        "coins": game.coins_collected,
        "seed": seed,
        "frames": frames,
    }


def simulate_batch(policy_name, seeds, settings=None):
    """Run multiple simulations sequentially with a fresh policy per seed.

    Used by the batch runner in worker processes.
    """
    return [simulate(load_policy(policy_name), seed, settings) for seed in seeds]


if __name__ == "__main__":
    result = simulate(AutopilotPolicy(), seed=42)
    print(f"Alive time: {result['alive_time']} frames ({result['alive_time'] / 60:.1f} sec)")
    print(f"Score: {result['score']} ({result['coins']} coins)")
    print(f"Frames recorded: {len(result['frames'])}")
