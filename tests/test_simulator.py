import logging

import pytest

from ranker.models import HandCategory, SimulationConfig
from ranker.simulator import _chunk_sizes, format_report, run_chunk, run_simulation


def test_counts_cover_every_trial():
    report = run_simulation(SimulationConfig(trials=2_000, chunk_size=500, seed=7))
    assert report.trials == 2_000
    assert set(report.counts) == set(HandCategory)
    assert sum(report.counts.values()) == 2_000


def test_common_hands_dominate():
    report = run_simulation(SimulationConfig(trials=2_000, chunk_size=1_000, seed=11))
    common = report.counts[HandCategory.HIGH_CARD] + report.counts[HandCategory.ONE_PAIR]
    assert common > 1_600


def test_same_seed_gives_same_report():
    config = SimulationConfig(trials=1_500, chunk_size=400, seed=42)
    assert run_simulation(config).counts == run_simulation(config).counts


def test_chunks_are_independent():
    assert run_chunk(seed=5, trials=200) == run_chunk(seed=5, trials=200)
    assert sum(run_chunk(seed=6, trials=150).values()) == 150


def test_chunk_sizes_split_remainder():
    assert _chunk_sizes(1_234, 500) == [500, 500, 234]
    assert _chunk_sizes(1_000, 500) == [500, 500]
    assert _chunk_sizes(3, 10) == [3]


def test_rows_run_from_royal_flush_down():
    report = run_simulation(SimulationConfig(trials=500, chunk_size=100, seed=3))
    rows = report.rows()
    assert [category for category, _, _ in rows] == sorted(HandCategory, reverse=True)
    assert sum(probability for _, _, probability in rows) == pytest.approx(100.0)


def test_format_report_renders_every_category():
    report = run_simulation(SimulationConfig(trials=300, chunk_size=100, seed=1))
    text = format_report(report)
    for category in HandCategory:
        assert category.label in text
    assert "Total" in text
    assert text.splitlines()[0].startswith("Rank")


def test_rejects_non_positive_settings():
    with pytest.raises(ValueError, match="Trials"):
        run_simulation(SimulationConfig(trials=0))
    with pytest.raises(ValueError, match="Chunk size"):
        run_simulation(SimulationConfig(trials=10, chunk_size=0))


def test_simulation_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="hand_simulator"):
        run_simulation(SimulationConfig(trials=50, chunk_size=25, seed=2))
    assert "Simulated 50 hands" in caplog.text
