from __future__ import annotations

import io
import random

from PIL import Image, ImageOps

from deskchaos.analysis import ChaosAnalyzer, analyze
from deskchaos.analysis.raster import rasterize


def _pattern_image(pixel, size=(400, 300)) -> Image.Image:
    width, height = size
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes(pixel(x, y))
    return Image.frombytes("RGB", size, bytes(data))


def _noise_image(seed: int = 1234) -> Image.Image:
    rng = random.Random(seed)

    def pixel(x: int, y: int) -> tuple[int, int, int]:
        if rng.random() < 0.5:
            level = rng.choice((0, 255))
            return (level, level, level)
        return (rng.randrange(256), rng.randrange(256), rng.randrange(256))

    return _pattern_image(pixel)


def test_rasterize_stretches_to_canonical_canvas() -> None:
    image = Image.new("RGB", (37, 901), color=(10, 20, 30))
    buffer = rasterize(image)

    assert (buffer.width, buffer.height) == (400, 300)
    assert len(buffer.data) == 400 * 300 * 4


def test_solid_image_scores_one() -> None:
    result = analyze(Image.new("RGB", (400, 300), color=(100, 150, 200)))

    assert result.chaos_level == 1
    assert result.metrics.color_count == 1
    assert result.metrics.variance == 0
    assert result.metrics.edge_count == 0
    assert result.metrics.color_diversity == 1
    assert result.metrics.contrast == 0
    assert result.metrics.edge_complexity == 0


def test_large_solid_image_is_resampled() -> None:
    result = analyze(Image.new("RGB", (1600, 1200), color=(100, 150, 200)))

    assert result.chaos_level == 1
    assert result.metrics.color_count == 1
    assert result.metrics.edge_count == 0


def test_transparent_pixels_read_as_black() -> None:
    image = Image.new("RGBA", (64, 48), color=(250, 10, 10, 0))
    result = analyze(image)

    assert result.chaos_level == 1
    assert result.metrics.color_count == 1
    assert result.metrics.variance == 0


def test_high_frequency_noise_scores_ten() -> None:
    result = analyze(_noise_image())

    assert result.chaos_level == 10
    assert result.metrics.color_diversity == 100
    assert result.metrics.contrast == 100
    assert result.metrics.edge_complexity == 100
    assert result.metrics.color_count > 150
    assert result.metrics.variance > 6000
    assert result.metrics.edge_count > 8000


def test_checkerboard_image_metrics() -> None:
    white, black = (255, 255, 255), (0, 0, 0)
    image = _pattern_image(lambda x, y: white if ((x // 4) + (y // 4)) % 2 else black)
    result = analyze(image)

    assert result.chaos_level == 6
    assert result.metrics.color_count == 2
    assert result.metrics.edge_count == 7400
    assert result.metrics.edge_complexity == 93
    assert result.metrics.contrast == 100


def test_repeated_analysis_is_identical() -> None:
    image = _noise_image(seed=99)
    analyzer = ChaosAnalyzer()

    first = analyzer.analyze(image)
    second = analyzer.analyze(image)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_exif_orientation_is_applied_before_measuring() -> None:
    white, black = (255, 255, 255), (0, 0, 0)
    upright = _pattern_image(lambda x, y: white if (x // 3) % 2 else black, size=(300, 400))
    exif = Image.Exif()
    exif[0x0112] = 6
    buf = io.BytesIO()
    # Orientation 6 means the stored pixels must turn 90 degrees clockwise.
    upright.transpose(Image.Transpose.ROTATE_90).save(
        buf, format="JPEG", quality=95, exif=exif.tobytes()
    )
    stored = Image.open(io.BytesIO(buf.getvalue()))
    stored.load()
    assert stored.size == (400, 300)
    assert stored.getexif().get(0x0112) == 6

    rotated = ImageOps.exif_transpose(stored)
    assert rotated.size == (300, 400)
    sideways = Image.frombytes(stored.mode, stored.size, stored.tobytes())

    result = analyze(stored)

    assert result == analyze(rotated)
    assert result != analyze(sideways)
