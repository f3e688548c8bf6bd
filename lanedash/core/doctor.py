from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from lanedash.config.schema import Settings
from simulator import available_policies


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def _config_check(settings: Settings) -> Check:
    pf = settings.playfield
    detail = f"width={pf.width} height={pf.height} road_width={pf.road_width}"
    try:
        settings.validate()
    except ValueError as exc:
        return Check("config", False, f"{detail} ({exc})")
    return Check("config", True, detail)


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(_config_check(settings))
    checks.append(Check("policies", bool(available_policies()), ", ".join(available_policies())))
    checks.append(Check("pygame", _has_module("pygame"), "required for the playable game"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation summaries"))
    return checks
