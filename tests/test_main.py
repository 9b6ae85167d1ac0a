from __future__ import annotations

import json
import logging

from fastapi import FastAPI

from deskchaos.api import main as main_module


def test_main_serves_app_with_cli_overrides(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "deskchaos.json"
    config_path.write_text(
        json.dumps({"server": {"host": "127.0.0.1", "port": 8100}, "upload": {"max_bytes": 4096}}),
        encoding="utf-8",
    )
    for name in ("DESKCHAOS_HOST", "DESKCHAOS_PORT", "DESKCHAOS_MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main_module, "load_dotenv", lambda: None)

    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    main_module.main(["--config", str(config_path), "--port", "9001"])

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert app.state.max_upload_bytes == 4096
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001


def test_missing_config_is_logged_once(tmp_path, monkeypatch, caplog) -> None:
    for name in ("DESKCHAOS_HOST", "DESKCHAOS_PORT", "DESKCHAOS_MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main_module, "load_dotenv", lambda: None)
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: None)

    with caplog.at_level(logging.INFO):
        main_module.main(["--config", str(tmp_path / "absent.json")])

    missing = [
        record for record in caplog.records if "absent.json" in record.getMessage()
    ]
    assert len(missing) == 1
    assert "deskchaos.example.json" in missing[0].getMessage()
