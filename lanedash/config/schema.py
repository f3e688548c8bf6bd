from __future__ import annotations

from dataclasses import dataclass, field, replace

from game_engine import Playfield, Rules


@dataclass(frozen=True)
class Settings:
    playfield: Playfield = field(default_factory=Playfield)
    rules: Rules = field(default_factory=Rules)

    fps: int = 60
    seed: int | None = None
    max_frames: int = 12_000

    sims_per_run: int = 20
    sim_workers: int = 2
    batch_size: int = 10

    def with_overrides(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)

    def validate(self) -> None:
        self.playfield.validate()
        self.rules.validate()
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        if self.max_frames <= 0:
            raise ValueError(f"max_frames must be > 0, got {self.max_frames}")
