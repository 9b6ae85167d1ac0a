"""JSON configuration for the Desk Chaos API server.

Settings are read from ``config/deskchaos.json`` (see
``config/deskchaos.example.json``). Environment variables override the file:

- ``DESKCHAOS_HOST``
- ``DESKCHAOS_PORT``
- ``DESKCHAOS_MAX_UPLOAD_BYTES``

The scoring constants are fixed and are not configurable here.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .service import DEFAULT_MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"critical", "error", "warning", "info", "debug"}


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"


@dataclass
class UploadSettings:
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


@dataclass
class AppConfig:
    server: ServerSettings = field(default_factory=ServerSettings)
    upload: UploadSettings = field(default_factory=UploadSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        server_data = data.get("server", {})
        if not isinstance(server_data, dict):
            server_data = {}
        upload_data = data.get("upload", {})
        if not isinstance(upload_data, dict):
            upload_data = {}

        defaults = ServerSettings()
        server = ServerSettings(
            host=str(server_data.get("host") or defaults.host),
            port=_positive_int(server_data.get("port"), defaults.port),
            log_level=_sanitize_log_level(server_data.get("log_level"), defaults.log_level),
        )
        upload = UploadSettings(
            max_bytes=_positive_int(upload_data.get("max_bytes"), DEFAULT_MAX_UPLOAD_BYTES),
        )
        return cls(server=server, upload=upload)


def _positive_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _sanitize_log_level(value: Any, default: str) -> str:
    if not isinstance(value, str):
        return default
    level = value.strip().lower()
    return level if level in _LOG_LEVELS else default


def apply_env_overrides(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> AppConfig:
    env = os.environ if environ is None else environ
    host = env.get("DESKCHAOS_HOST")
    if host:
        config.server.host = host
    config.server.port = _positive_int(env.get("DESKCHAOS_PORT"), config.server.port)
    config.upload.max_bytes = _positive_int(
        env.get("DESKCHAOS_MAX_UPLOAD_BYTES"), config.upload.max_bytes
    )
    return config


def load_config(
    path: str | Path | None, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Load configuration from ``path``; ``None`` or a missing file gives defaults.

    Raises:
        ValueError: If the file exists but is not a JSON object.
    """
    if path is None or not Path(path).exists():
        if path is not None:
            logger.info(
                "No configuration file at %s; using defaults. "
                "Copy config/deskchaos.example.json to config/deskchaos.json",
                path,
            )
        return apply_env_overrides(AppConfig(), environ)

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")

    config = AppConfig.from_dict(data)
    logger.info(
        "Loaded configuration from %s host=%s port=%d max_upload_bytes=%d",
        config_path,
        config.server.host,
        config.server.port,
        config.upload.max_bytes,
    )
    return apply_env_overrides(config, environ)


__all__ = [
    "AppConfig",
    "ServerSettings",
    "UploadSettings",
    "apply_env_overrides",
    "load_config",
]
