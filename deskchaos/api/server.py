from __future__ import annotations

import logging
import random

from fastapi import FastAPI, HTTPException

from .presentation import CHAOS_LEVELS
from .schemas import AnalysisRequest, AnalysisResponse, ChaosLevelModel
from .service import DEFAULT_MAX_UPLOAD_BYTES, AnalysisService, UploadValidationError
from ..analysis import Analyzer, ChaosAnalyzer


logger = logging.getLogger(__name__)


def create_app(
    analyzer: Analyzer | None = None,
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    rng: random.Random | None = None,
) -> FastAPI:
    selected_analyzer = analyzer or ChaosAnalyzer()
    service = AnalysisService(
        analyzer=selected_analyzer,
        max_upload_bytes=max_upload_bytes,
        rng=rng or random.Random(),
    )

    app = FastAPI(title="Desk Chaos Analyzer API", version="0.1.0")
    app.state.service = service
    app.state.analyzer = selected_analyzer
    app.state.max_upload_bytes = max_upload_bytes

    logger.info(
        "API server initialised analyzer=%s max_upload_bytes=%d",
        selected_analyzer.__class__.__name__,
        max_upload_bytes,
    )

    @app.get("/health", response_model=dict[str, str])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/v1/levels", response_model=list[ChaosLevelModel])
    def list_levels() -> list[ChaosLevelModel]:
        return [ChaosLevelModel(**level.to_dict()) for level in CHAOS_LEVELS]

    # Sync route: Starlette runs the CPU-bound analysis in its threadpool.
    @app.post("/v1/analyses", response_model=AnalysisResponse)
    def create_analysis(request: AnalysisRequest) -> AnalysisResponse:
        logger.info(
            "Analysis requested filename=%s content_type=%s payload_bytes=%d",
            request.filename,
            request.content_type,
            len(request.image_base64 or ""),
        )
        try:
            result = service.process_upload(request.model_dump())
        except UploadValidationError as exc:
            logger.warning("Rejected upload status=%d reason=%s", exc.status_code, exc)
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        logger.info(
            "Analysis served level=%d degraded=%s",
            result["level"],
            result["degraded"],
        )
        return AnalysisResponse(**result)

    return app


__all__ = ["create_app"]
