from __future__ import annotations

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.settings import Settings


@pytest.fixture()
def todos_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def client(todos_file: Path) -> TestClient:
    app = create_app(Settings(todos_file=str(todos_file)))
    return TestClient(app)


@pytest.fixture(autouse=True)
def _isolate_loggers():
    """Restore logger state that configure_logging mutates, so tests stay order-independent."""
    names = ("todo_api", "uvicorn", "uvicorn.error", "uvicorn.access")
    saved = {}
    for name in names:
        lg = logging.getLogger(name)
        saved[name] = (list(lg.handlers), lg.propagate, lg.level)
        for h in list(lg.handlers):
            lg.removeHandler(h)
        lg.propagate = True
    yield
    for name, (handlers, propagate, level) in saved.items():
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            lg.removeHandler(h)
        for h in handlers:
            lg.addHandler(h)
        lg.propagate = propagate
        lg.setLevel(level)
