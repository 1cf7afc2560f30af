"""Monte Carlo frequencies of the ten hand categories.

Each trial shuffles a fresh deck and ranks the top five cards. Trials run in
chunks with their own seeded RNG, so every chunk is independent of the others
and the per-chunk counts can simply be summed.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import List

from .cards import build_deck
from .evaluator import HAND_SIZE, classify
from .models import HandCategory, SimulationConfig, SimulationReport

LOGGER = logging.getLogger("hand_simulator")


def run_simulation(config: SimulationConfig) -> SimulationReport:
    if config.trials <= 0:
        raise ValueError("Trials must be positive")
    if config.chunk_size <= 0:
        raise ValueError("Chunk size must be positive")

    master = random.Random(config.seed)
    totals: Counter = Counter()
    for chunk_trials in _chunk_sizes(config.trials, config.chunk_size):
        chunk_seed = master.getrandbits(32)
        totals.update(run_chunk(chunk_seed, chunk_trials))
        LOGGER.debug("Chunk seed=%s trials=%s done", chunk_seed, chunk_trials)

    LOGGER.info("Simulated %s hands", config.trials)
    return SimulationReport(trials=config.trials, counts={category: totals.get(category, 0) for category in HandCategory})


def run_chunk(seed: int, trials: int) -> Counter:
    """Rank ``trials`` random hands; the result depends only on the arguments."""
    rng = random.Random(seed)
    counts: Counter = Counter()
    for _ in range(trials):
        deck = build_deck(rng.getrandbits(32))
        counts[classify(deck[:HAND_SIZE]).category] += 1
    return counts


def _chunk_sizes(trials: int, chunk_size: int) -> List[int]:
    full, remainder = divmod(trials, chunk_size)
    sizes = [chunk_size] * full
    if remainder:
        sizes.append(remainder)
    return sizes


def format_report(report: SimulationReport) -> str:
    lines = [f"{'Rank':<18}{'Count':>10}{'Probability':>14}", "-" * 42]
    for category, count, probability in report.rows():
        lines.append(f"{category.label:<18}{count:>10,}{probability:>13.4f}%")
    lines.append("-" * 42)
    lines.append(f"{'Total':<18}{report.trials:>10,}")
    return "\n".join(lines)
