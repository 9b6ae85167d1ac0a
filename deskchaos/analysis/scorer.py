"""Turn raw image statistics into a bounded chaos level.

The weighted base score is nudged by one rule per statistic. Rules run in a
fixed order and the running score is clamped after every rule, so a large
penalty that bottoms out at the lower bound is not cancelled by a later bonus.
"""

from __future__ import annotations

import math
from typing import Callable

from .types import (
    DEFAULT_CONSTANTS,
    NormalizedStatistics,
    RawStatistics,
    ScoringConstants,
)

AdjustmentRule = Callable[[RawStatistics, ScoringConstants], int]


def clamp(value: int, constants: ScoringConstants = DEFAULT_CONSTANTS) -> int:
    return max(constants.min_level, min(constants.max_level, value))


def normalize(
    raw: RawStatistics, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> NormalizedStatistics:
    return NormalizedStatistics(
        color_diversity=min(raw.distinct_color_count / constants.max_color_count, 1.0),
        contrast_level=min(raw.luminance_variance / constants.max_variance, 1.0),
        edge_density=min(raw.edge_count / constants.max_edge_count, 1.0),
    )


def base_score(
    normalized: NormalizedStatistics, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> int:
    weighted = (
        normalized.color_diversity * constants.color_weight
        + normalized.contrast_level * constants.contrast_weight
        + normalized.edge_density * constants.edge_weight
    )
    return math.floor(weighted * constants.score_multiplier) + constants.base_score


def edge_adjustment(raw: RawStatistics, constants: ScoringConstants) -> int:
    if raw.edge_count > constants.high_edge_threshold:
        return 2
    if raw.edge_count > constants.medium_edge_threshold:
        return 1
    if raw.edge_count < constants.low_edge_threshold:
        return -4
    return 0


def color_adjustment(raw: RawStatistics, constants: ScoringConstants) -> int:
    if raw.distinct_color_count > constants.high_color_threshold:
        return 1
    if raw.distinct_color_count < constants.low_color_threshold:
        return -3
    return 0


def variance_adjustment(raw: RawStatistics, constants: ScoringConstants) -> int:
    if raw.luminance_variance > constants.high_variance_threshold:
        return 1
    if raw.luminance_variance < constants.low_variance_threshold:
        return -2
    return 0


ADJUSTMENT_RULES: tuple[AdjustmentRule, ...] = (
    edge_adjustment,
    color_adjustment,
    variance_adjustment,
)


def apply_adjustments(
    level: int, raw: RawStatistics, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> int:
    for rule in ADJUSTMENT_RULES:
        level = clamp(level + rule(raw, constants), constants)
    return level


def score(
    raw: RawStatistics, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> tuple[int, NormalizedStatistics]:
    """Return the chaos level together with the normalized statistics."""
    normalized = normalize(raw, constants)
    adjusted = apply_adjustments(base_score(normalized, constants), raw, constants)
    return clamp(adjusted, constants), normalized


__all__ = [
    "ADJUSTMENT_RULES",
    "apply_adjustments",
    "base_score",
    "clamp",
    "color_adjustment",
    "edge_adjustment",
    "normalize",
    "score",
    "variance_adjustment",
]
