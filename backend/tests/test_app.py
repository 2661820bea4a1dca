# backend/tests/test_app.py

from __future__ import annotations

import logging

from tasksync.core.config import Settings
from tasksync.core.logging_setup import LOGGER_NAME, setup_logging


def test_health(client):
    r = client.get("/api/v1/health")

    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_route_uses_error_shape(client):
    r = client.get("/api/v1/nope")

    assert r.status_code == 404
    assert "error" in r.json()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("API_V1_PREFIX", "/v2")
    monkeypatch.setenv("JWT_SECRET", "from-env")

    s = Settings()

    assert s.API_V1_PREFIX == "/v2"
    assert s.JWT_SECRET == "from-env"
    assert s.AUTH_HEADER == "x-auth-token"


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "logs" / "tasksync.log"

    setup_logging("DEBUG", str(log_file))
    logger = setup_logging("DEBUG", str(log_file))
    logger.getChild("test").debug("hello file")

    owned = [h for h in logger.handlers if getattr(h, "_tasksync", False)]
    assert len(owned) == 2
    assert logger.level == logging.DEBUG
    for h in owned:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")

    setup_logging("INFO")
    assert logging.getLogger(LOGGER_NAME).level == logging.INFO


def test_default_jwt_secret_is_long_enough_for_hs256(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)

    s = Settings(_env_file=None)

    assert len(s.JWT_SECRET.encode()) >= 32
