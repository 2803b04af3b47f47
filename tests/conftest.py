"""
Shared fixtures.

Redis is replaced by an in-memory double; the app's singletons are
swapped out through FastAPI dependency overrides.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from nexushub.apps.tools.schemas import ToolSuggestion
from nexushub.core.state import AppState
from nexushub.core.storage import SnapshotStorage

from factories import FakeAnalyzer, InMemoryRedis


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def storage(fake_redis):
    return SnapshotStorage(client=fake_redis, prefix="nexushub")


@pytest_asyncio.fixture
async def state(storage):
    s = AppState(storage=storage)
    await s.load()
    return s


@pytest.fixture
def analyzer():
    return FakeAnalyzer(
        ToolSuggestion(
            category="Development",
            description="Hosted Git repositories and CI",
            tags=["Git", "CI", "Code"],
        )
    )


@pytest_asyncio.fixture
async def client(state, analyzer):
    from main import app
    from nexushub.apps.tools.routers import limiter
    from nexushub.core.dependencies import get_app_state, get_storage, get_tool_analyzer

    app.dependency_overrides[get_app_state] = lambda: state
    app.dependency_overrides[get_storage] = lambda: state.storage
    app.dependency_overrides[get_tool_analyzer] = lambda: analyzer
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
