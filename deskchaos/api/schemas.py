from __future__ import annotations

from pydantic import BaseModel, Field


class AnalysisRequest(BaseModel):
    image_base64: str = Field(..., description="Base64 encoded image")
    content_type: str | None = Field(
        default=None, description="MIME type of the upload, e.g. image/jpeg"
    )
    filename: str | None = Field(
        default=None, description="Original filename, used to guess the MIME type"
    )


class MetricsModel(BaseModel):
    color_count: int
    variance: int
    edge_count: int
    color_diversity: int = Field(..., ge=0, le=100)
    contrast: int = Field(..., ge=0, le=100)
    edge_complexity: int = Field(..., ge=0, le=100)


class DetailsModel(BaseModel):
    creativity: int
    organization: int
    inspiration: int
    mystery: int


class ChaosLevelModel(BaseModel):
    level: int = Field(..., ge=1, le=10)
    title: str
    description: str
    emoji: str


class AnalysisResponse(ChaosLevelModel):
    comment: str
    details: DetailsModel
    metrics: MetricsModel | None = None
    degraded: bool = False
    analyzed_at: str


__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ChaosLevelModel",
    "DetailsModel",
    "MetricsModel",
]
