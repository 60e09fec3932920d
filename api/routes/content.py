"""
FastAPI routes for safety tips, method information and route feedback.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.schemas.content import (
    FeedbackListResponse,
    FeedbackRequest,
    FeedbackResponse,
    InfoResponse,
    SafetyTipsResponse
)
from api.services.content import METHOD_INFO, SAFETY_TIPS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/safety-tips", response_model=SafetyTipsResponse, summary="Safety Tips")
async def get_safety_tips():
    """Walking safety tips shown next to the route results."""
    return {"tips": SAFETY_TIPS}


@router.get("/info", response_model=InfoResponse, summary="How Lighting Is Scored")
async def get_info():
    """Explain how the light score is built and what it cannot capture."""
    return METHOD_INFO


@router.post(
    "/feedback",
    response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Route Feedback"
)
async def submit_feedback(feedback: FeedbackRequest, request: Request):
    """
    Record a rating (0-5) with optional flags and comment for a route variant.
    """
    if feedback.rating is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "rating is required (0-5)"}
        )

    record = request.app.state.feedback_store.add(
        rating=feedback.rating,
        flags=feedback.flags,
        comment=feedback.comment,
        route_id=feedback.route_id
    )
    return {"message": "Feedback received", "feedback": record}


@router.get("/feedback", response_model=FeedbackListResponse, summary="List Feedback")
async def list_feedback(request: Request):
    """All feedback received since the service started."""
    items = request.app.state.feedback_store.list()
    return {"count": len(items), "feedback": items}
