from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from PIL import Image

from .raster import rasterize
from .scorer import score
from .stats import compute_raw_statistics
from .types import (
    DEFAULT_CONSTANTS,
    ChaosMetrics,
    NormalizedStatistics,
    RawStatistics,
    ScoreResult,
    ScoringConstants,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (not to even)."""
    return int(math.floor(value + 0.5))


def to_percent(value: float) -> int:
    return round_half_up(value * 100)


def assemble_result(
    chaos_level: int, raw: RawStatistics, normalized: NormalizedStatistics
) -> ScoreResult:
    metrics = ChaosMetrics(
        color_count=raw.distinct_color_count,
        variance=round_half_up(raw.luminance_variance),
        edge_count=raw.edge_count,
        color_diversity=to_percent(normalized.color_diversity),
        contrast=to_percent(normalized.contrast_level),
        edge_complexity=to_percent(normalized.edge_density),
    )
    return ScoreResult(chaos_level=chaos_level, metrics=metrics)


def analyze(
    image: Image.Image, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> ScoreResult:
    buffer = rasterize(image, constants)
    raw = compute_raw_statistics(buffer, constants)
    chaos_level, normalized = score(raw, constants)
    logger.debug(
        "Chaos analysis source=%dx%d colors=%d variance=%.2f edges=%d level=%d",
        image.width,
        image.height,
        raw.distinct_color_count,
        raw.luminance_variance,
        raw.edge_count,
        chaos_level,
    )
    return assemble_result(chaos_level, raw, normalized)


@dataclass(frozen=True)
class ChaosAnalyzer:
    """Stateless analyzer bound to a set of scoring constants."""

    constants: ScoringConstants = DEFAULT_CONSTANTS

    def analyze(self, image: Image.Image) -> ScoreResult:
        return analyze(image, self.constants)


__all__ = [
    "ChaosAnalyzer",
    "analyze",
    "assemble_result",
    "round_half_up",
    "to_percent",
]
