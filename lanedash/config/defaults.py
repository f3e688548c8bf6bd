from __future__ import annotations

import multiprocessing as _mp

import game_engine

from .schema import Settings


def default_settings() -> Settings:
    """Settings built from the canonical headless engine constants to avoid drift."""
    playfield = game_engine.Playfield(
        width=game_engine.WIDTH,
        height=game_engine.HEIGHT,
        road_width=game_engine.ROAD_WIDTH,
    )
    return Settings(
        playfield=playfield,
        rules=game_engine.Rules(),
        fps=game_engine.FPS,
        sim_workers=max(1, _mp.cpu_count() - 2),
    )
