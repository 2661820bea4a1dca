# backend/tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from tasksync.core.config import Settings
from tasksync.core.security import create_access_token
from tasksync.main import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file per test."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'tasks.db'}",
        JWT_SECRET="test-secret-with-at-least-32-bytes!",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app) -> Iterator[TestClient]:
    # context manager runs startup, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth(settings: Settings) -> Callable[[str], Dict[str, str]]:
    def _headers(uid: str) -> Dict[str, str]:
        return {settings.AUTH_HEADER: create_access_token(uid, settings)}

    return _headers
