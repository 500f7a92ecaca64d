"""Pydantic request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RecommendationCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    youtube_link: str = Field(alias="youtubeLink")


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    youtube_link: str = Field(serialization_alias="youtubeLink")
    score: int


class ErrorResponse(BaseModel):
    detail: str
