from __future__ import annotations

from PIL import Image, ImageOps

from .types import DEFAULT_CONSTANTS, PixelBuffer, ScoringConstants

_RESAMPLE = Image.Resampling.BILINEAR


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


def rasterize(
    image: Image.Image, constants: ScoringConstants = DEFAULT_CONSTANTS
) -> PixelBuffer:
    """Stretch ``image`` onto the canonical canvas and return its RGBA bytes.

    The EXIF orientation is applied first, so camera photos are measured
    upright. The aspect ratio is not preserved. Transparent regions are
    composited onto a transparent black canvas, so fully transparent pixels
    read as black.
    """
    size = (constants.canvas_width, constants.canvas_height)
    translucent = _has_alpha(image)
    upright = ImageOps.exif_transpose(image) or image
    rgba = upright.convert("RGBA")
    if rgba.size != size:
        rgba = rgba.resize(size, resample=_RESAMPLE)
    if translucent:
        canvas = Image.new("RGBA", size, (0, 0, 0, 0))
        rgba = Image.alpha_composite(canvas, rgba)
    return PixelBuffer(width=size[0], height=size[1], data=rgba.tobytes())


__all__ = ["rasterize"]
