"""
AI helper endpoints.

DESIGN PRINCIPLES (CRITICAL):
- AI output is ADVISORY, for triage screens only
- These endpoints never fail because the AI backend failed
- When AI is unavailable, the documented defaults are returned with 200

Handlers are sync: provider calls block on HTTP, so FastAPI runs them in its
threadpool.
"""

from fastapi import APIRouter
from civic_connect.models.ai import (
    CategoryResponse,
    ImageAnalysis,
    ImageAnalysisRequest,
    IssueDescriptionRequest,
    ResolutionPrediction,
    ResolutionTimeRequest,
    ResponseSuggestion,
    SeverityAssessment,
)
from civic_connect.services.ai_service import get_ai_service


router = APIRouter(prefix="/ai", tags=["AI Assistance"])


@router.post("/classify", response_model=CategoryResponse)
def classify_issue(payload: IssueDescriptionRequest):
    """Suggest a category for an issue description."""
    category = get_ai_service().classify_issue_category(payload.description)
    return CategoryResponse(category=category)


@router.post("/severity", response_model=SeverityAssessment)
def assess_severity(payload: IssueDescriptionRequest):
    """Suggest a severity level with a short reasoning."""
    return get_ai_service().assess_issue_severity(payload.description)


@router.post("/response-suggestion", response_model=ResponseSuggestion)
def suggest_response(payload: IssueDescriptionRequest):
    """Draft a reply an official could send to the citizen."""
    suggestion = get_ai_service().generate_response_suggestion(payload.description)
    return ResponseSuggestion(suggestion=suggestion)


@router.post("/image-analysis", response_model=ImageAnalysis)
def analyze_image(payload: ImageAnalysisRequest):
    """Check whether a photo matches the reported issue category."""
    return get_ai_service().analyze_issue_image(payload.image_url, payload.issue_category)


@router.post("/resolution-time", response_model=ResolutionPrediction)
def predict_resolution(payload: ResolutionTimeRequest):
    """Estimate how many days an issue will take to resolve."""
    return get_ai_service().predict_resolution_time(
        payload.category,
        payload.severity,
        payload.location,
    )
