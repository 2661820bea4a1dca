# backend/tests/test_store_failures.py

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from tasksync.db.session import get_session, make_engine

TASKS = "/api/v1/tasks/"


@pytest.fixture()
def broken_client(app, tmp_path):
    """
    App whose sessions talk to a database that has no tables, so every
    statement fails inside the store layer.
    """
    engine = make_engine(f"sqlite:///{tmp_path / 'empty.db'}")

    def _session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("POST", TASKS, {"title": "x", "dueAt": "2024-06-01"}, "Failed to create task."),
        ("GET", TASKS, None, "Failed to fetch tasks."),
        (
            "PUT",
            TASKS + "3f1c2b9e-8e0a-4c47-9d0e-2a3b4c5d6e7f",
            {"title": "x", "dueAt": "2024-06-01"},
            "Failed to update task.",
        ),
        ("DELETE", TASKS + "3f1c2b9e-8e0a-4c47-9d0e-2a3b4c5d6e7f", None, "Failed to delete task."),
        (
            "POST",
            TASKS + "sync",
            [{"title": "x", "dueAt": "2024-06-01", "createdAt": "2024-05-01", "updatedAt": "2024-05-01"}],
            "Failed to sync tasks.",
        ),
    ],
)
def test_store_errors_are_opaque_500s(broken_client, auth, method, path, body, message):
    r = broken_client.request(method, path, json=body, headers=auth("alice"))

    assert r.status_code == 500
    assert r.json() == {"error": message}
    assert "no such table" not in r.text


def test_store_errors_are_logged(broken_client, auth, caplog):
    with caplog.at_level(logging.ERROR, logger="tasksync"):
        broken_client.get(TASKS, headers=auth("alice"))

    messages = [rec.getMessage() for rec in caplog.records if rec.levelno == logging.ERROR]
    assert any("Error fetching tasks" in m and "no such table" in m for m in messages)


def test_not_found_is_not_logged_as_error(client, auth, caplog):
    with caplog.at_level(logging.INFO, logger="tasksync"):
        r = client.delete(TASKS + "3f1c2b9e-8e0a-4c47-9d0e-2a3b4c5d6e7f", headers=auth("alice"))

    assert r.status_code == 404
    assert not [rec for rec in caplog.records if rec.levelno >= logging.ERROR]
