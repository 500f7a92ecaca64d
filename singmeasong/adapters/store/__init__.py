"""Record store adapters and backend selection."""

from singmeasong.adapters.store.memory import InMemoryRecommendationStore
from singmeasong.adapters.store.sql import SQLRecommendationStore
from singmeasong.config import Settings, StoreBackend
from singmeasong.ports.store import RecommendationStorePort


def build_store(config: Settings) -> RecommendationStorePort:
    """Instantiate the store selected by ``config.store_backend``."""
    if config.store_backend is StoreBackend.MEMORY:
        return InMemoryRecommendationStore()

    from singmeasong.database import async_session_factory

    return SQLRecommendationStore(async_session_factory)


__all__ = [
    "InMemoryRecommendationStore",
    "SQLRecommendationStore",
    "build_store",
]
