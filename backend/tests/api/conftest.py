"""API test fixtures — FastAPI test client with fake collaborators on app.state.

Invariants:
    - Lifespan is NOT run (ASGITransport skips it): no Redis or PDP contacted
    - Each test gets fresh fakes; app.state restored afterwards
    - Fixtures return the fakes so tests can script and inspect them
"""

import pytest
from httpx import ASGITransport, AsyncClient

from beerpong.main import app
from tests.fakes import FakePolicyClient, FakeThrowCache, RecordingPublisher


@pytest.fixture
def fake_cache():
    return FakeThrowCache()


@pytest.fixture
def fake_policy():
    return FakePolicyClient(allow=True)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
async def client(fake_cache, fake_policy, publisher):
    """FastAPI test client with fake cache, policy client and publisher."""
    saved = {
        name: getattr(app.state, name, None)
        for name in ("cache", "policy_client", "publisher")
    }
    app.state.cache = fake_cache
    app.state.policy_client = fake_policy
    app.state.publisher = publisher

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    for name, value in saved.items():
        setattr(app.state, name, value)
