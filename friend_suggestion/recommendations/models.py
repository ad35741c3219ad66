from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RankingMode(str, Enum):
    weighted = "weighted"
    jaccard = "jaccard"


class Suggestion(BaseModel):
    friend_id: str
    jaccard_similarity: float = Field(..., ge=0.0, le=1.0)
    mutual_friends_count: int = Field(..., ge=0)
    visits_count: int = Field(..., ge=0)
    combined_score: float


class SuggestionResponse(BaseModel):
    user_id: str
    ranking: RankingMode
    suggestions: list[Suggestion]


class UserCreate(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class FriendshipRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    friend_id: str = Field(..., min_length=1)


class VisitRequest(BaseModel):
    visitor_id: str = Field(..., min_length=1)
    visited_id: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: str
    name: str
    friends: list[str]
    visit_targets: list[str]
    suggestions_summary: str
