from __future__ import annotations

import base64
import io
import logging
import mimetypes
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from PIL import Image

from ..analysis import Analyzer, ChaosAnalyzer
from .presentation import (
    FALLBACK_DETAILS,
    cosmetic_details,
    level_for,
    pick_comment,
    random_level,
)


logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class UploadValidationError(ValueError):
    status_code: int = 400


class InvalidPayloadError(UploadValidationError):
    status_code = 400


class UnsupportedMediaTypeError(UploadValidationError):
    status_code = 415


class UploadTooLargeError(UploadValidationError):
    status_code = 413


def resolve_content_type(content_type: str | None, filename: str | None) -> str | None:
    if content_type and content_type.strip():
        return content_type.strip().lower()
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed.lower()
    return None


@dataclass
class AnalysisService:
    analyzer: Analyzer = field(default_factory=ChaosAnalyzer)
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    rng: random.Random = field(default_factory=random.Random)

    def validate_upload(self, payload: Dict[str, Any]) -> bytes:
        content_type = resolve_content_type(
            payload.get("content_type"), payload.get("filename")
        )
        if content_type is None or not content_type.startswith("image/"):
            raise UnsupportedMediaTypeError(
                f"Please upload an image file (got {content_type or 'unknown type'})"
            )
        image_base64: str = payload["image_base64"]
        # Reject before decoding so oversized uploads are never copied whole.
        estimated = len(image_base64) * 3 // 4 - image_base64[-2:].count("=")
        if estimated > self.max_upload_bytes:
            raise UploadTooLargeError(
                f"Image is about {estimated} bytes; the limit is {self.max_upload_bytes} bytes"
            )
        try:
            image_bytes = base64.b64decode(image_base64, validate=True)
        except ValueError as exc:
            raise InvalidPayloadError("Invalid base64 image payload") from exc
        if len(image_bytes) > self.max_upload_bytes:
            raise UploadTooLargeError(
                f"Image is {len(image_bytes)} bytes; the limit is {self.max_upload_bytes} bytes"
            )
        return image_bytes

    def process_upload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        image_bytes = self.validate_upload(payload)
        logger.info(
            "Running chaos analysis filename=%s content_type=%s image_bytes=%d",
            payload.get("filename"),
            payload.get("content_type"),
            len(image_bytes),
        )
        try:
            image = self._decode(image_bytes)
        except (OSError, Image.DecompressionBombError) as exc:
            logger.exception("Failed to decode uploaded image: %s", exc)
            return self._fallback_result()

        result = self.analyzer.analyze(image)
        logger.info(
            "Chaos analysis complete level=%d colors=%d variance=%d edges=%d",
            result.chaos_level,
            result.metrics.color_count,
            result.metrics.variance,
            result.metrics.edge_count,
        )
        level = level_for(result.chaos_level)
        return {
            **level.to_dict(),
            "comment": pick_comment(self.rng),
            "details": cosmetic_details(result, self.rng).to_dict(),
            "metrics": result.to_dict()["metrics"],
            "degraded": False,
            "analyzed_at": _now_iso(),
        }

    @staticmethod
    def _decode(image_bytes: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
        return image

    def _fallback_result(self) -> Dict[str, Any]:
        level = random_level(self.rng)
        logger.warning("Returning degraded chaos result level=%d", level.level)
        return {
            **level.to_dict(),
            "comment": pick_comment(self.rng),
            "details": FALLBACK_DETAILS.to_dict(),
            "metrics": None,
            "degraded": True,
            "analyzed_at": _now_iso(),
        }


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


__all__ = [
    "AnalysisService",
    "DEFAULT_MAX_UPLOAD_BYTES",
    "InvalidPayloadError",
    "UnsupportedMediaTypeError",
    "UploadTooLargeError",
    "UploadValidationError",
    "resolve_content_type",
]
