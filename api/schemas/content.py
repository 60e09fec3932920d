"""
Pydantic schemas for safety tips, method information and route feedback.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SafetyTip(BaseModel):
    id: int
    category: str
    text: str


class SafetyTipsResponse(BaseModel):
    tips: List[SafetyTip]


class InfoResponse(BaseModel):
    """How the light score is calculated, and its limits."""
    title: str
    description: str
    steps: List[str]
    limitations: List[str]


class FeedbackRequest(BaseModel):
    """User feedback about a suggested route."""
    rating: Optional[float] = Field(default=None, ge=0, le=5, description="Rating from 0 to 5")
    flags: Optional[List[str]] = Field(default=None, description="Issue flags, e.g. 'dark-segment'")
    comment: Optional[str] = Field(default=None, description="Free-text comment")
    route_id: Optional[str] = Field(default=None, description="Variant id the feedback refers to")


class FeedbackRecord(BaseModel):
    id: str
    rating: float
    flags: List[str]
    comment: str
    route_id: Optional[str]
    created_at: str


class FeedbackResponse(BaseModel):
    message: str
    feedback: FeedbackRecord


class FeedbackListResponse(BaseModel):
    count: int
    feedback: List[FeedbackRecord]
