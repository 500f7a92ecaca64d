import itertools
import logging
from dataclasses import replace

from singmeasong.domain.exceptions import ConflictError
from singmeasong.ports.store import RecommendationRecord, RecommendationStorePort

logger = logging.getLogger(__name__)


class InMemoryRecommendationStore(RecommendationStorePort):
    """
    Process-local store for development and tests.

    No method awaits while touching state, so each call is atomic on the
    event loop. Ids come from a counter and are never reused.
    """

    def __init__(self) -> None:
        self._rows: dict[int, RecommendationRecord] = {}
        self._ids = itertools.count(1)

    async def insert(
        self, name: str, youtube_link: str, score: int = 0
    ) -> RecommendationRecord:
        if any(row.name == name for row in self._rows.values()):
            raise ConflictError(name)
        record = RecommendationRecord(
            id=next(self._ids), name=name, youtube_link=youtube_link, score=score
        )
        self._rows[record.id] = record
        return record

    async def find_by_id(self, recommendation_id: int) -> RecommendationRecord | None:
        return self._rows.get(recommendation_id)

    async def find_by_name(self, name: str) -> RecommendationRecord | None:
        return next((row for row in self._rows.values() if row.name == name), None)

    async def adjust_score(
        self, recommendation_id: int, delta: int
    ) -> RecommendationRecord | None:
        current = self._rows.get(recommendation_id)
        if current is None:
            return None
        updated = replace(current, score=current.score + delta)
        self._rows[recommendation_id] = updated
        return updated

    async def delete(self, recommendation_id: int) -> None:
        if self._rows.pop(recommendation_id, None) is None:
            logger.warning("Recommendation %d not found for deletion", recommendation_id)

    async def list_recent(self, limit: int) -> list[RecommendationRecord]:
        newest_first = sorted(self._rows.values(), key=lambda row: row.id, reverse=True)
        return newest_first[:limit]

    async def list_all(self) -> list[RecommendationRecord]:
        return sorted(self._rows.values(), key=lambda row: row.id)
