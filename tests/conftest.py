import pytest
from httpx import ASGITransport, AsyncClient

from todo_api import config
from todo_api.main import app
from todo_api.store import ResourceStore, get_store
from todo_api.tokens import TokenRegistry, get_token_registry

START_MS = 1_760_000_000_000


class FakeClock:
    def __init__(self, now_ms: int = START_MS):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return ResourceStore()


@pytest.fixture
def registry(clock):
    return TokenRegistry(clock=clock)


@pytest.fixture
def initialized_app(store, registry):
    # fresh state per test
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_token_registry] = lambda: registry
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(initialized_app):
    async with AsyncClient(transport=ASGITransport(app=initialized_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def token(client):
    res = await client.post("/login", auth=(config.API_USERNAME, config.API_PASSWORD))
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
async def api(client, token):
    """Client that sends a valid bearer token with every request."""
    client.headers["Authorization"] = f"Bearer {token}"
    return client
