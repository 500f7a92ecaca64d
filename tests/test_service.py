"""Recommendation service rules, exercised against the in-memory store."""

import random

import pytest

from singmeasong.adapters.store import InMemoryRecommendationStore
from singmeasong.domain.exceptions import ConflictError, NotFoundError, ValidationError
from singmeasong.ports.store import RecommendationRecord
from singmeasong.services.ranking import pick_weighted, rank_by_score
from singmeasong.services.recommendation import RecommendationService

from .conftest import YOUTUBE_LINK, StubRandom

# ── Creation ───────────────────────────────────────


@pytest.mark.asyncio
async def test_create_starts_at_zero(service: RecommendationService):
    first = await service.create("Song A", YOUTUBE_LINK)
    second = await service.create("Song B", YOUTUBE_LINK)

    assert first.score == 0
    assert first.youtube_link == YOUTUBE_LINK
    assert second.id > first.id


@pytest.mark.asyncio
async def test_create_duplicate_name_conflicts(service: RecommendationService):
    await service.create("Song A", YOUTUBE_LINK)
    with pytest.raises(ConflictError):
        await service.create("Song A", "https://youtu.be/dQw4w9WgXcQ")


@pytest.mark.asyncio
async def test_name_uniqueness_is_case_sensitive(service: RecommendationService):
    await service.create("Song A", YOUTUBE_LINK)
    other = await service.create("song a", YOUTUBE_LINK)
    assert other.name == "song a"


@pytest.mark.asyncio
async def test_create_rejects_non_youtube_link(
    service: RecommendationService, memory_store: InMemoryRecommendationStore
):
    with pytest.raises(ValidationError) as exc_info:
        await service.create("Song A", "https://www.google.com/")
    assert exc_info.value.field == "youtubeLink"
    assert await memory_store.list_all() == []


@pytest.mark.asyncio
async def test_create_rejects_empty_name(service: RecommendationService):
    with pytest.raises(ValidationError):
        await service.create("", YOUTUBE_LINK)


@pytest.mark.asyncio
async def test_bad_link_wins_over_taken_name(service: RecommendationService):
    await service.create("Song A", YOUTUBE_LINK)
    with pytest.raises(ValidationError):
        await service.create("Song A", "https://www.google.com/")


# ── Voting ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_upvote_adds_one(service: RecommendationService):
    rec = await service.create("Song A", YOUTUBE_LINK)
    await service.upvote(rec.id)
    updated = await service.upvote(rec.id)
    assert updated.score == 2
    assert (await service.get_by_id(rec.id)).score == 2


@pytest.mark.asyncio
async def test_upvote_never_deletes(
    service: RecommendationService, memory_store: InMemoryRecommendationStore
):
    rec = await memory_store.insert("Hated", YOUTUBE_LINK, score=-40)
    updated = await service.upvote(rec.id)
    assert updated.score == -39
    assert await memory_store.find_by_id(rec.id) is not None


@pytest.mark.asyncio
async def test_downvote_subtracts_one(service: RecommendationService):
    rec = await service.create("Song A", YOUTUBE_LINK)
    updated = await service.downvote(rec.id)
    assert updated is not None
    assert updated.score == -1


@pytest.mark.asyncio
async def test_six_downvotes_remove_recommendation(service: RecommendationService):
    rec = await service.create("Song A", YOUTUBE_LINK)

    for expected in range(-1, -6, -1):
        updated = await service.downvote(rec.id)
        assert updated is not None
        assert updated.score == expected

    assert await service.downvote(rec.id) is None
    with pytest.raises(NotFoundError):
        await service.get_by_id(rec.id)


@pytest.mark.asyncio
async def test_removed_id_is_not_reused(service: RecommendationService):
    rec = await service.create("Song A", YOUTUBE_LINK)
    for _ in range(6):
        await service.downvote(rec.id)

    newer = await service.create("Song A", YOUTUBE_LINK)
    assert newer.id > rec.id


@pytest.mark.asyncio
async def test_votes_on_unknown_id(
    service: RecommendationService, memory_store: InMemoryRecommendationStore
):
    rec = await service.create("Song A", YOUTUBE_LINK)

    with pytest.raises(NotFoundError):
        await service.upvote(rec.id + 1000)
    with pytest.raises(NotFoundError):
        await service.downvote(rec.id + 1000)

    assert await memory_store.list_all() == [rec]


@pytest.mark.asyncio
async def test_custom_removal_threshold(memory_store: InMemoryRecommendationStore):
    strict = RecommendationService(memory_store, removal_threshold=0)
    rec = await strict.create("Song A", YOUTUBE_LINK)
    assert await strict.downvote(rec.id) is None


# ── Retrieval ──────────────────────────────────────


@pytest.mark.asyncio
async def test_list_recent_caps_at_ten_newest_first(service: RecommendationService):
    created = [await service.create(f"Song {i}", YOUTUBE_LINK) for i in range(15)]

    recent = await service.list_recent()

    assert len(recent) == 10
    assert recent[0] == created[-1]
    assert [rec.id for rec in recent] == sorted((rec.id for rec in created[5:]), reverse=True)


@pytest.mark.asyncio
async def test_list_recent_never_exceeds_window(service: RecommendationService):
    for i in range(12):
        await service.create(f"Song {i}", YOUTUBE_LINK)
    assert len(await service.list_recent(50)) == 10
    assert len(await service.list_recent(3)) == 3


@pytest.mark.asyncio
async def test_list_recent_empty(service: RecommendationService):
    assert await service.list_recent() == []


@pytest.mark.asyncio
async def test_get_by_id_unknown(service: RecommendationService):
    with pytest.raises(NotFoundError):
        await service.get_by_id(1)


@pytest.mark.asyncio
async def test_get_top_orders_by_score(
    service: RecommendationService, memory_store: InMemoryRecommendationStore
):
    five = await memory_store.insert("Five", YOUTUBE_LINK, score=5)
    twenty = await memory_store.insert("Twenty", YOUTUBE_LINK, score=20)
    await memory_store.insert("One", YOUTUBE_LINK, score=1)

    assert await service.get_top(2) == [twenty, five]
    assert len(await service.get_top(10)) == 3
    assert await service.get_top(0) == []


@pytest.mark.asyncio
async def test_get_top_empty_population(service: RecommendationService):
    assert await service.get_top(5) == []


@pytest.mark.asyncio
async def test_get_random_empty_population(service: RecommendationService):
    with pytest.raises(NotFoundError):
        await service.get_random()


@pytest.mark.asyncio
async def test_get_random_returns_stored_record(
    memory_store: InMemoryRecommendationStore,
):
    service = RecommendationService(memory_store, rng=random.Random(7))
    stored = [await service.create(f"Song {i}", YOUTUBE_LINK) for i in range(5)]
    for _ in range(20):
        assert await service.get_random() in stored


# ── Ranking helpers ────────────────────────────────


def _rec(rec_id: int, score: int) -> RecommendationRecord:
    return RecommendationRecord(
        id=rec_id, name=f"Song {rec_id}", youtube_link=YOUTUBE_LINK, score=score
    )


def test_pick_weighted_prefers_popular_on_low_roll():
    popular, other = _rec(1, 11), _rec(2, 10)
    assert pick_weighted([other, popular], StubRandom(roll=0.69)) == popular


def test_pick_weighted_prefers_others_on_high_roll():
    popular, other = _rec(1, 50), _rec(2, -3)
    assert pick_weighted([popular, other], StubRandom(roll=0.7)) == other


def test_pick_weighted_falls_back_when_group_empty():
    only_popular = [_rec(1, 30), _rec(2, 40)]
    only_others = [_rec(3, 0), _rec(4, 10)]

    rng = StubRandom(roll=0.9)
    assert pick_weighted(only_popular, rng) in only_popular
    assert rng.choices[-1] == only_popular

    rng = StubRandom(roll=0.1)
    assert pick_weighted(only_others, rng) in only_others
    assert rng.choices[-1] == only_others


def test_pick_weighted_empty():
    with pytest.raises(NotFoundError):
        pick_weighted([], random.Random(1))


def test_pick_weighted_bias_towards_popular():
    popular, other = _rec(1, 25), _rec(2, 0)
    rng = random.Random(1234)

    picks = [pick_weighted([popular, other], rng) for _ in range(2000)]

    share = picks.count(popular) / len(picks)
    assert 0.6 < share < 0.8


def test_pick_weighted_respects_configured_share():
    popular, other = _rec(1, 25), _rec(2, 0)
    assert pick_weighted([popular, other], StubRandom(0.5), popular_share=40) == other

    rng = StubRandom(0.5)
    pick_weighted([popular, other], rng, popularity_threshold=30)
    assert rng.choices[-1] == [popular, other]


def test_rank_by_score_ties_keep_creation_order():
    records = [_rec(3, 4), _rec(1, 4), _rec(2, 9), _rec(4, -2)]
    ranked = rank_by_score(records, 10)
    assert [rec.id for rec in ranked] == [2, 1, 3, 4]
    assert [rec.score for rec in ranked] == sorted((rec.score for rec in records), reverse=True)
    assert rank_by_score(records, -1) == []
