"""Record store port — abstract persistence contract for recommendations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendationRecord:
    """A stored recommendation as seen by the service."""

    id: int
    name: str
    youtube_link: str
    score: int = 0


class RecommendationStorePort(ABC):
    """Abstraction over the persistent recommendation store."""

    @abstractmethod
    async def insert(
        self, name: str, youtube_link: str, score: int = 0
    ) -> RecommendationRecord:
        """Store a new recommendation. Raises ConflictError on a duplicate name."""
        ...

    @abstractmethod
    async def find_by_id(self, recommendation_id: int) -> RecommendationRecord | None:
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> RecommendationRecord | None:
        ...

    @abstractmethod
    async def adjust_score(
        self, recommendation_id: int, delta: int
    ) -> RecommendationRecord | None:
        """
        Atomically add ``delta`` to the score.

        Returns the post-adjust record, or None if the id does not exist.
        """
        ...

    @abstractmethod
    async def delete(self, recommendation_id: int) -> None:
        ...

    @abstractmethod
    async def list_recent(self, limit: int) -> list[RecommendationRecord]:
        """Return up to ``limit`` records, newest first."""
        ...

    @abstractmethod
    async def list_all(self) -> list[RecommendationRecord]:
        ...
