"""Recommendation lifecycle: creation, voting and retrieval."""

import logging
import random

from singmeasong.domain.exceptions import ConflictError, NotFoundError, ValidationError
from singmeasong.domain.links import is_youtube_link
from singmeasong.domain.validation import validate_recommendation
from singmeasong.ports.store import RecommendationRecord, RecommendationStorePort
from singmeasong.services.ranking import pick_weighted, rank_by_score

logger = logging.getLogger(__name__)


class RecommendationService:
    """Owns the recommendation rules; all state lives in the store."""

    def __init__(
        self,
        store: RecommendationStorePort,
        *,
        recent_limit: int = 10,
        removal_threshold: int = -5,
        popularity_threshold: int = 10,
        popular_share: float = 70.0,
        rng: random.Random | None = None,
    ) -> None:
        self._store = store
        self._recent_limit = recent_limit
        self._removal_threshold = removal_threshold
        self._popularity_threshold = popularity_threshold
        self._popular_share = popular_share
        self._rng = rng or random.Random()

    async def create(self, name: str, youtube_link: str) -> RecommendationRecord:
        """
        Store a new recommendation with a score of zero.

        Raises ValidationError for a missing field or a non-YouTube link,
        and ConflictError if the name is already taken.
        """
        validate_recommendation(name, youtube_link)
        if not is_youtube_link(youtube_link):
            raise ValidationError(
                "youtubeLink must be a YouTube video URL", field="youtubeLink"
            )

        if await self._store.find_by_name(name):
            raise ConflictError(name)

        record = await self._store.insert(name, youtube_link, score=0)
        logger.info("Created recommendation %d (%s)", record.id, record.name)
        return record

    async def upvote(self, recommendation_id: int) -> RecommendationRecord:
        record = await self._store.adjust_score(recommendation_id, 1)
        if record is None:
            raise NotFoundError.for_id(recommendation_id)
        logger.debug("Upvoted %d, score=%d", record.id, record.score)
        return record

    async def downvote(self, recommendation_id: int) -> RecommendationRecord | None:
        """
        Lower the score by one.

        Returns None when the new score fell below the removal threshold and
        the recommendation was deleted.
        """
        record = await self._store.adjust_score(recommendation_id, -1)
        if record is None:
            raise NotFoundError.for_id(recommendation_id)

        if record.score < self._removal_threshold:
            await self._store.delete(record.id)
            logger.info(
                "Removed recommendation %d (score %d below %d)",
                record.id,
                record.score,
                self._removal_threshold,
            )
            return None

        logger.debug("Downvoted %d, score=%d", record.id, record.score)
        return record

    async def list_recent(self, limit: int | None = None) -> list[RecommendationRecord]:
        """Newest recommendations first, never more than the configured window."""
        window = self._recent_limit if limit is None else min(limit, self._recent_limit)
        if window <= 0:
            return []
        return await self._store.list_recent(window)

    async def get_by_id(self, recommendation_id: int) -> RecommendationRecord:
        record = await self._store.find_by_id(recommendation_id)
        if record is None:
            raise NotFoundError.for_id(recommendation_id)
        return record

    async def get_random(self) -> RecommendationRecord:
        population = await self._store.list_all()
        return pick_weighted(
            population,
            self._rng,
            popularity_threshold=self._popularity_threshold,
            popular_share=self._popular_share,
        )

    async def get_top(self, amount: int) -> list[RecommendationRecord]:
        if amount <= 0:
            return []
        return rank_by_score(await self._store.list_all(), amount)
