"""Lifespan — clients wired onto app.state at startup and closed at shutdown.

Design Decisions:
    - connect_cache patched in beerpong.main: no Redis contacted
    - Starlette TestClient used because it runs the lifespan (ASGITransport does not)
"""

import pytest
from fastapi.testclient import TestClient

import beerpong.main as main_module
from beerpong.infrastructure.event_publisher import LoggingEventPublisher
from beerpong.infrastructure.policy_client import PermitPolicyClient
from beerpong.main import app
from tests.fakes import FakeThrowCache

VALID = {"user_id": "alice", "role": "player", "action": "throw", "target": "cup3"}


@pytest.fixture(autouse=True)
def restore_state():
    saved = {
        name: getattr(app.state, name, None)
        for name in ("cache", "policy_client", "publisher")
    }
    yield
    for name, value in saved.items():
        setattr(app.state, name, value)


def _patch_cache(monkeypatch, cache):
    async def fake_connect(url, **kwargs):
        return cache

    monkeypatch.setattr(main_module, "connect_cache", fake_connect)


def test_startup_wires_clients_and_shutdown_closes_cache(monkeypatch):
    cache = FakeThrowCache()
    _patch_cache(monkeypatch, cache)

    with TestClient(app) as tc:
        assert app.state.cache is cache
        assert isinstance(app.state.policy_client, PermitPolicyClient)
        assert isinstance(app.state.publisher, LoggingEventPublisher)
        res = tc.post("/throw", json=VALID)
        assert res.status_code == 202

    assert cache.peek("ball:alice") == "cup3"
    assert cache.closed is True


def test_unreachable_cache_at_startup_refuses_throws(monkeypatch):
    _patch_cache(monkeypatch, None)

    with TestClient(app) as tc:
        assert app.state.cache is None
        res = tc.post("/throw", json=VALID)
        assert res.status_code == 503
