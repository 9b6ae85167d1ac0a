from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import requests


@dataclass
class ChaosApiHttpClient:
    base_url: str
    timeout: float = 20.0
    session: requests.Session = field(default_factory=requests.Session)

    def analyze_bytes(
        self, data: bytes, content_type: str, filename: str | None = None
    ) -> Dict[str, Any]:
        payload = {
            "image_base64": base64.b64encode(data).decode("ascii"),
            "content_type": content_type,
            "filename": filename,
        }
        try:
            response = self.session.post(
                f"{self.base_url.rstrip('/')}/v1/analyses",
                json=payload,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError("Timed out waiting for chaos analysis response") from exc
        except requests.RequestException as exc:
            raise RuntimeError(f"Failed to call chaos API: {exc}") from exc
        if response.status_code >= 400:
            raise RuntimeError(
                f"Chaos API rejected image ({response.status_code}): {_error_detail(response)}"
            )
        return response.json()

    def analyze_file(self, path: str | Path) -> Dict[str, Any]:
        image_path = Path(path)
        content_type, _ = mimetypes.guess_type(image_path.name)
        return self.analyze_bytes(
            image_path.read_bytes(),
            content_type=content_type or "application/octet-stream",
            filename=image_path.name,
        )


def _error_detail(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)


__all__ = ["ChaosApiHttpClient"]
