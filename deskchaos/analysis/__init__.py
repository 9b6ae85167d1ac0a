from __future__ import annotations

from .analyzer import ChaosAnalyzer, analyze
from .types import (
    DEFAULT_CONSTANTS,
    Analyzer,
    ChaosMetrics,
    NormalizedStatistics,
    PixelBuffer,
    RawStatistics,
    ScoreResult,
    ScoringConstants,
)

__all__ = [
    "Analyzer",
    "ChaosAnalyzer",
    "ChaosMetrics",
    "DEFAULT_CONSTANTS",
    "NormalizedStatistics",
    "PixelBuffer",
    "RawStatistics",
    "ScoreResult",
    "ScoringConstants",
    "analyze",
]
