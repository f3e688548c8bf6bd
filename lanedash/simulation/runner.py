from __future__ import annotations

"""Parallel simulation runner for headless autopilot sessions."""

import multiprocessing
import random
from itertools import islice
from typing import Any

import numpy as np

from lanedash.config.schema import Settings


def _run_seed_batch(args):
    """Worker function: run one chunk of seeds with a fresh policy per seed."""
    from simulator import simulate_batch

    policy_name, seeds, settings = args
    return simulate_batch(policy_name, seeds, settings)


def _chunked(items, chunk_size):
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    it = iter(items)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


def summarize(runs: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate alive-time and score statistics over finished runs."""
    if not runs:
        raise ValueError("cannot summarize an empty list of runs")
    alive_times = [r["alive_time"] for r in runs]
    scores = [r["score"] for r in runs]
    return {
        "avg_alive": float(np.mean(alive_times)),
        "std_alive": float(np.std(alive_times)),
        "min_alive": int(np.min(alive_times)),
        "max_alive": int(np.max(alive_times)),
        "avg_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "max_score": int(np.max(scores)),
        "runs": runs,
    }


def run_simulations(
    settings: Settings,
    policy_name: str = "autopilot",
    *,
    n_sims: int | None = None,
    batch_size: int | None = None,
) -> dict[str, Any]:
    """Run repeated simulations for one policy and aggregate metrics."""
    n_sims = n_sims or settings.sims_per_run
    batch_size = batch_size or settings.batch_size
    if n_sims <= 0:
        raise ValueError(f"n_sims must be > 0, got {n_sims}")
    if batch_size <= 0:
        raise ValueError(f"batch_size must be > 0, got {batch_size}")

    rng = random.Random(settings.seed)
    seeds = rng.sample(range(100_000), n_sims)
    all_runs: list[dict[str, Any]] = []
    n_batches = (n_sims + batch_size - 1) // batch_size

    for batch_idx in range(n_batches):
        batch_seeds = seeds[batch_idx * batch_size:(batch_idx + 1) * batch_size]

        worker_count = max(1, min(len(batch_seeds), settings.sim_workers))
        seeds_per_worker = max(1, (len(batch_seeds) + worker_count - 1) // worker_count)
        args_list = [
            (policy_name, seed_chunk, settings)
            for seed_chunk in _chunked(batch_seeds, seeds_per_worker)
        ]

        if worker_count == 1:
            batch_results = [_run_seed_batch(args) for args in args_list]
        else:
            with multiprocessing.Pool(processes=worker_count) as pool:
                batch_results = pool.map(_run_seed_batch, args_list)

        for worker_runs in batch_results:
            all_runs.extend(worker_runs)

        avg_so_far = sum(r["alive_time"] for r in all_runs) / len(all_runs)
        print(
            f"  Batch {batch_idx + 1}/{n_batches} complete "
            f"({len(all_runs)}/{n_sims} sims, running avg: {avg_so_far:.0f} frames)"
        )

    return summarize(all_runs)
