"""SQLAlchemy-backed recommendation store."""

import logging
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from singmeasong.domain.exceptions import ConflictError
from singmeasong.domain.models import Recommendation
from singmeasong.ports.store import RecommendationRecord, RecommendationStorePort

logger = logging.getLogger(__name__)

# Ids are SQL INTEGER (signed 64-bit); anything outside cannot exist
_MAX_ID = 2**63 - 1

_COLUMNS = (
    Recommendation.id,
    Recommendation.name,
    Recommendation.youtube_link,
    Recommendation.score,
)


def _storable_id(recommendation_id: int) -> bool:
    return -_MAX_ID - 1 <= recommendation_id <= _MAX_ID


def _to_record(row: Any) -> RecommendationRecord:
    return RecommendationRecord(
        id=row.id,
        name=row.name,
        youtube_link=row.youtube_link,
        score=row.score,
    )


class SQLRecommendationStore(RecommendationStorePort):
    """
    Store recommendations in a relational database.

    Every call runs in its own session and transaction. Score changes are a
    single ``UPDATE ... RETURNING`` statement so concurrent votes never read
    a stale value.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def insert(
        self, name: str, youtube_link: str, score: int = 0
    ) -> RecommendationRecord:
        row = Recommendation(name=name, youtube_link=youtube_link, score=score)
        try:
            async with self._session_factory() as session, session.begin():
                session.add(row)
                await session.flush()
                record = _to_record(row)
        except IntegrityError as exc:
            raise ConflictError(name) from exc
        logger.debug("Inserted recommendation row %d", record.id)
        return record

    async def find_by_id(self, recommendation_id: int) -> RecommendationRecord | None:
        if not _storable_id(recommendation_id):
            return None
        async with self._session_factory() as session:
            result = await session.execute(
                select(*_COLUMNS).where(Recommendation.id == recommendation_id)
            )
            row = result.one_or_none()
        return _to_record(row) if row else None

    async def find_by_name(self, name: str) -> RecommendationRecord | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(*_COLUMNS).where(Recommendation.name == name)
            )
            row = result.one_or_none()
        return _to_record(row) if row else None

    async def adjust_score(
        self, recommendation_id: int, delta: int
    ) -> RecommendationRecord | None:
        if not _storable_id(recommendation_id):
            return None
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                update(Recommendation)
                .where(Recommendation.id == recommendation_id)
                .values(score=Recommendation.score + delta)
                .returning(*_COLUMNS)
                .execution_options(synchronize_session=False)
            )
            row = result.one_or_none()
        return _to_record(row) if row else None

    async def delete(self, recommendation_id: int) -> None:
        if not _storable_id(recommendation_id):
            return
        async with self._session_factory() as session, session.begin():
            await session.execute(
                delete(Recommendation)
                .where(Recommendation.id == recommendation_id)
                .execution_options(synchronize_session=False)
            )

    async def list_recent(self, limit: int) -> list[RecommendationRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(*_COLUMNS).order_by(Recommendation.id.desc()).limit(limit)
            )
            rows = result.all()
        return [_to_record(row) for row in rows]

    async def list_all(self) -> list[RecommendationRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(*_COLUMNS).order_by(Recommendation.id)
            )
            rows = result.all()
        return [_to_record(row) for row in rows]
