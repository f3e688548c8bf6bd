from __future__ import annotations

from dataclasses import replace

from .defaults import default_settings
from .schema import Settings


def load_settings(
    *,
    width: float | None = None,
    height: float | None = None,
    road_width: float | None = None,
    fps: int | None = None,
    seed: int | None = None,
) -> Settings:
    """Load runtime settings, defaulting to the engine constants.

    Raises ValueError when the resulting configuration is unusable
    (e.g. a road at least as wide as the playfield).
    """
    settings = default_settings()
    pf_overrides = {
        k: v for k, v in (("width", width), ("height", height), ("road_width", road_width))
        if v is not None
    }
    if pf_overrides:
        settings = settings.with_overrides(playfield=replace(settings.playfield, **pf_overrides))
    if fps is not None:
        settings = settings.with_overrides(fps=fps)
    if seed is not None:
        settings = settings.with_overrides(seed=seed)
    settings.validate()
    return settings
