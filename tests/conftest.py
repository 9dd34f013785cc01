from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from nimm.core.game import Game
from nimm.settings import Settings, get_settings
from nimm.state import SessionState


@pytest.fixture()
def game() -> Game:
    return Game()


@pytest.fixture()
def state() -> SessionState:
    return SessionState(term="xterm-256color", width=80, height=24)


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """TestClient whose sessions tick once an hour, so frames only follow our own input."""

    from nimm.main import app

    app.dependency_overrides[get_settings] = lambda: Settings(tick_seconds=3600)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
