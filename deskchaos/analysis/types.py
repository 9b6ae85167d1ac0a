from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from PIL import Image


@dataclass(frozen=True)
class ScoringConstants:
    """Fixed parameters of the chaos scoring pipeline."""

    canvas_width: int = 400
    canvas_height: int = 300
    # 4 bytes per pixel, so every 4th pixel is sampled.
    sample_stride_bytes: int = 16
    color_bucket_size: int = 32
    edge_threshold: float = 30.0
    edge_x_step: int = 4

    max_color_count: float = 150.0
    max_variance: float = 6000.0
    max_edge_count: float = 8000.0

    color_weight: float = 0.25
    contrast_weight: float = 0.4
    edge_weight: float = 0.35

    score_multiplier: int = 6
    base_score: int = 2
    min_level: int = 1
    max_level: int = 10

    high_edge_threshold: int = 6000
    medium_edge_threshold: int = 3000
    low_edge_threshold: int = 1000
    high_color_threshold: int = 130
    low_color_threshold: int = 70
    high_variance_threshold: float = 5000.0
    low_variance_threshold: float = 2000.0


DEFAULT_CONSTANTS = ScoringConstants()


@dataclass(frozen=True)
class PixelBuffer:
    """RGBA bytes of an image resampled to the canonical canvas."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Pixel buffer holds {len(self.data)} bytes; expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    def offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4


@dataclass(frozen=True)
class RawStatistics:
    distinct_color_count: int
    luminance_variance: float
    edge_count: int


@dataclass(frozen=True)
class NormalizedStatistics:
    color_diversity: float
    contrast_level: float
    edge_density: float


@dataclass(frozen=True)
class ChaosMetrics:
    color_count: int
    variance: int
    edge_count: int
    color_diversity: int
    contrast: int
    edge_complexity: int


@dataclass(frozen=True)
class ScoreResult:
    chaos_level: int
    metrics: ChaosMetrics

    def to_dict(self) -> dict[str, Any]:
        return {
            "chaos_level": self.chaos_level,
            "metrics": {
                "color_count": self.metrics.color_count,
                "variance": self.metrics.variance,
                "edge_count": self.metrics.edge_count,
                "color_diversity": self.metrics.color_diversity,
                "contrast": self.metrics.contrast,
                "edge_complexity": self.metrics.edge_complexity,
            },
        }


class Analyzer(Protocol):
    def analyze(self, image: Image.Image) -> "ScoreResult": ...


__all__ = [
    "Analyzer",
    "ChaosMetrics",
    "DEFAULT_CONSTANTS",
    "NormalizedStatistics",
    "PixelBuffer",
    "RawStatistics",
    "ScoreResult",
    "ScoringConstants",
]
