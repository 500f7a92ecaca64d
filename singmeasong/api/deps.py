"""FastAPI dependency wiring for the recommendation service."""

from functools import lru_cache

from fastapi import Depends

from singmeasong.adapters.store import build_store
from singmeasong.config import settings
from singmeasong.ports.store import RecommendationStorePort
from singmeasong.services.recommendation import RecommendationService


@lru_cache
def get_store() -> RecommendationStorePort:
    return build_store(settings)


def get_recommendation_service(
    store: RecommendationStorePort = Depends(get_store),
) -> RecommendationService:
    return RecommendationService(
        store,
        recent_limit=settings.recent_limit,
        removal_threshold=settings.removal_threshold,
        popularity_threshold=settings.popularity_threshold,
        popular_share=settings.popular_share,
    )
