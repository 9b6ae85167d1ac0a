from __future__ import annotations

from typing import Sequence

from .sampler import luminance, sample_pixels
from .types import DEFAULT_CONSTANTS, PixelBuffer, RawStatistics, ScoringConstants


def population_variance(values: Sequence[float]) -> float:
    """Mean of squared deviations from the mean (divides by N, not N-1)."""
    if not values:
        return 0.0
    total = 0.0
    for value in values:
        total += value
    mean = total / len(values)
    squared = 0.0
    for value in values:
        squared += (value - mean) ** 2
    return squared / len(values)


def count_edges(
    buffer: PixelBuffer, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> int:
    """Count interior positions whose right or lower neighbour differs in luma.

    Every interior row is visited, while x advances by ``edge_x_step``. This
    sweep is independent of the byte stride used by :func:`sample_pixels`.
    """
    data = buffer.data
    row_bytes = buffer.width * 4
    threshold = constants.edge_threshold
    edges = 0
    for y in range(1, buffer.height - 1):
        for x in range(1, buffer.width - 1, constants.edge_x_step):
            idx = buffer.offset(x, y)
            current = luminance(data[idx], data[idx + 1], data[idx + 2])
            right = luminance(data[idx + 4], data[idx + 5], data[idx + 6])
            below = idx + row_bytes
            down = luminance(data[below], data[below + 1], data[below + 2])
            if abs(current - right) > threshold or abs(current - down) > threshold:
                edges += 1
    return edges


def compute_raw_statistics(
    buffer: PixelBuffer, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> RawStatistics:
    samples = sample_pixels(buffer, constants)
    return RawStatistics(
        distinct_color_count=len(samples.color_keys),
        luminance_variance=population_variance(samples.luminances),
        edge_count=count_edges(buffer, constants),
    )


__all__ = ["compute_raw_statistics", "count_edges", "population_variance"]
