"""Recommendation routes."""

from fastapi import APIRouter, Depends, Path, Response, status

from singmeasong.api.deps import get_recommendation_service
from singmeasong.api.schemas import (
    ErrorResponse,
    RecommendationCreateRequest,
    RecommendationResponse,
)
from singmeasong.services.recommendation import RecommendationService

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=RecommendationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_recommendation(
    data: RecommendationCreateRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    """Submit a new song recommendation."""
    record = await service.create(data.name, data.youtube_link)
    return RecommendationResponse.model_validate(record)


@router.get("", response_model=list[RecommendationResponse])
async def list_recent(
    service: RecommendationService = Depends(get_recommendation_service),
) -> list[RecommendationResponse]:
    """Latest recommendations, newest first."""
    records = await service.list_recent()
    return [RecommendationResponse.model_validate(rec) for rec in records]


@router.get("/random", response_model=RecommendationResponse, responses=_NOT_FOUND)
async def get_random(
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    """One recommendation, biased towards well-voted songs."""
    return RecommendationResponse.model_validate(await service.get_random())


@router.get("/top/{amount}", response_model=list[RecommendationResponse])
async def get_top(
    amount: int = Path(ge=0),
    service: RecommendationService = Depends(get_recommendation_service),
) -> list[RecommendationResponse]:
    """Up to ``amount`` recommendations ordered by score."""
    records = await service.get_top(amount)
    return [RecommendationResponse.model_validate(rec) for rec in records]


@router.get(
    "/{recommendation_id}", response_model=RecommendationResponse, responses=_NOT_FOUND
)
async def get_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    return RecommendationResponse.model_validate(
        await service.get_by_id(recommendation_id)
    )


@router.post(
    "/{recommendation_id}/upvote",
    response_model=RecommendationResponse,
    responses=_NOT_FOUND,
)
async def upvote(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    return RecommendationResponse.model_validate(
        await service.upvote(recommendation_id)
    )


@router.post(
    "/{recommendation_id}/downvote",
    response_model=RecommendationResponse,
    responses=_NOT_FOUND,
)
async def downvote(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse | Response:
    """Lower the score; an empty 200 means the song was voted out."""
    record = await service.downvote(recommendation_id)
    if record is None:
        return Response(status_code=status.HTTP_200_OK)
    return RecommendationResponse.model_validate(record)
