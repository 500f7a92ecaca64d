from collections.abc import AsyncGenerator, Sequence
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from singmeasong.adapters.store import InMemoryRecommendationStore, SQLRecommendationStore
from singmeasong.api.deps import get_store
from singmeasong.database import build_session_factory, create_schema
from singmeasong.main import app
from singmeasong.services.recommendation import RecommendationService

BASE = "http://test"
YOUTUBE_LINK = "https://www.youtube.com/watch?v=E1jRjGhohpA"


def recommendation_body(**overrides) -> dict[str, str]:
    body = {"name": f"Song {uuid4().hex[:8]}", "youtubeLink": YOUTUBE_LINK}
    body.update(overrides)
    return body


class StubRandom:
    """Deterministic stand-in for random.Random: fixed roll, first element."""

    def __init__(self, roll: float) -> None:
        self.roll = roll
        self.choices: list[Sequence] = []

    def random(self) -> float:
        return self.roll

    def choice(self, seq: Sequence):
        self.choices.append(seq)
        return seq[0]


@pytest.fixture
def memory_store() -> InMemoryRecommendationStore:
    return InMemoryRecommendationStore()


@pytest.fixture
def service(memory_store: InMemoryRecommendationStore) -> RecommendationService:
    return RecommendationService(memory_store)


@pytest.fixture
async def sql_store(tmp_path) -> AsyncGenerator[SQLRecommendationStore, None]:
    """A SQL store on a fresh SQLite file per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_schema(engine)
    yield SQLRecommendationStore(build_session_factory(engine))
    await engine.dispose()


@pytest.fixture
async def client(sql_store: SQLRecommendationStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_store] = lambda: sql_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════
# Run with: pip install -e ".[test]" && pytest
# (asyncio_mode = "auto" is set in pyproject.toml)
# ═══════════════════════════════════════════════════
