from __future__ import annotations

import time

from lanedash.config.loader import load_settings
from lanedash.core.doctor import run_doctor


def _settings_from_args(args):
    try:
        return load_settings(
            width=args.width,
            height=args.height,
            road_width=args.road_width,
            fps=args.fps,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"[config] {exc}")
        raise SystemExit(2) from exc


def cmd_play(args):
    settings = _settings_from_args(args)
    from lanedash.ui.app_game import main as play

    return play(settings)


def cmd_simulate(args):
    settings = _settings_from_args(args)
    if args.workers is not None:
        settings = settings.with_overrides(sim_workers=args.workers)
    from lanedash.simulation.runner import run_simulations

    print("\n" + "=" * 50)
    print(f"SIMULATION: {args.policy} policy")
    print("=" * 50)
    start = time.time()
    try:
        results = run_simulations(settings, args.policy, n_sims=args.sims)
    except ValueError as exc:
        print(f"[simulate] {exc}")
        raise SystemExit(2) from exc
    print(f"  Time: {time.time() - start:.1f}s")

    fps = settings.fps
    print(
        f"  alive: avg = {results['avg_alive']:.0f} frames ({results['avg_alive'] / fps:.1f}s), "
        f"std = {results['std_alive']:.0f}, min = {results['min_alive']}, max = {results['max_alive']}"
    )
    print(
        f"  score: avg = {results['avg_score']:.1f} (+/- {results['std_score']:.1f}), "
        f"best = {results['max_score']}"
    )
    return 0


def cmd_doctor(args):
    settings = _settings_from_args(args)
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
    return 0 if ok_count == len(checks) else 1
