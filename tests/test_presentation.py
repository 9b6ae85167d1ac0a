from __future__ import annotations

import random

import pytest

from deskchaos.analysis.types import ChaosMetrics, ScoreResult
from deskchaos.api.presentation import (
    CHAOS_LEVELS,
    COMMENTS,
    cosmetic_details,
    level_for,
    pick_comment,
)


def _result(level: int, diversity: int = 50, edges: int = 50) -> ScoreResult:
    return ScoreResult(
        chaos_level=level,
        metrics=ChaosMetrics(
            color_count=75,
            variance=3000,
            edge_count=4000,
            color_diversity=diversity,
            contrast=50,
            edge_complexity=edges,
        ),
    )


def test_level_table_has_ten_entries_in_order() -> None:
    assert len(CHAOS_LEVELS) == 10
    assert [entry.level for entry in CHAOS_LEVELS] == list(range(1, 11))
    assert level_for(1).title == "Zen State"
    assert level_for(10).title == "Cosmic Mystery"


@pytest.mark.parametrize("level", [0, 11, -1])
def test_level_for_rejects_out_of_range(level: int) -> None:
    with pytest.raises(ValueError):
        level_for(level)


def test_pick_comment_comes_from_table() -> None:
    rng = random.Random(3)
    for _ in range(20):
        assert pick_comment(rng) in COMMENTS


def test_cosmetic_details_stay_in_range() -> None:
    rng = random.Random(11)
    for level in range(1, 11):
        for diversity, edges in ((0, 0), (100, 100), (95, 60)):
            details = cosmetic_details(_result(level, diversity, edges), rng)
            assert diversity <= details.creativity <= min(100, diversity + 19)
            assert 10 <= details.organization <= 110 - level * 10 + 19
            assert min(100, edges + 50) <= details.inspiration <= 100
            assert min(100, level * 8) <= details.mystery <= 100
