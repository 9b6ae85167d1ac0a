from __future__ import annotations

from dataclasses import dataclass, field

from .types import DEFAULT_CONSTANTS, PixelBuffer, ScoringConstants

ColorKey = tuple[int, int, int]


def luminance(r: int, g: int, b: int) -> float:
    """Perceptual luma with Rec. 601 weights."""
    return 0.299 * r + 0.587 * g + 0.114 * b


def color_key(r: int, g: int, b: int, bucket_size: int = 32) -> ColorKey:
    return (r // bucket_size, g // bucket_size, b // bucket_size)


@dataclass
class PixelSamples:
    color_keys: set[ColorKey] = field(default_factory=set)
    luminances: list[float] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.luminances)


def sample_pixels(
    buffer: PixelBuffer, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> PixelSamples:
    """Walk the buffer at a fixed byte stride collecting color keys and luma."""
    samples = PixelSamples()
    data = buffer.data
    bucket = constants.color_bucket_size
    for i in range(0, len(data), constants.sample_stride_bytes):
        r, g, b = data[i], data[i + 1], data[i + 2]
        samples.color_keys.add(color_key(r, g, b, bucket))
        samples.luminances.append(luminance(r, g, b))
    return samples


__all__ = ["ColorKey", "PixelSamples", "color_key", "luminance", "sample_pixels"]
