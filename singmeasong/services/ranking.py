"""Pure selection and ordering over a snapshot of recommendations."""

import random
from collections.abc import Sequence

from singmeasong.domain.exceptions import NotFoundError
from singmeasong.ports.store import RecommendationRecord


def pick_weighted(
    population: Sequence[RecommendationRecord],
    rng: random.Random,
    popularity_threshold: int = 10,
    popular_share: float = 70.0,
) -> RecommendationRecord:
    """
    Pick one recommendation, biased towards popular ones.

    A roll in [0, 100) below ``popular_share`` draws from the records scoring
    above ``popularity_threshold``; any other roll draws from the rest. When
    the preferred group is empty the other group is used instead.

    Raises NotFoundError when the population is empty.
    """
    if not population:
        raise NotFoundError("No recommendations available")

    popular = [rec for rec in population if rec.score > popularity_threshold]
    others = [rec for rec in population if rec.score <= popularity_threshold]

    roll = rng.random() * 100
    preferred, fallback = (popular, others) if roll < popular_share else (others, popular)
    return rng.choice(preferred or fallback)


def rank_by_score(
    population: Sequence[RecommendationRecord], amount: int
) -> list[RecommendationRecord]:
    """Highest score first; ties keep creation order."""
    if amount <= 0:
        return []
    ordered = sorted(population, key=lambda rec: (-rec.score, rec.id))
    return ordered[:amount]
