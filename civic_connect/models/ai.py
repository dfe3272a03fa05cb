"""
Pydantic models for the AI helper endpoints.

The assessment models double as the expected JSON shapes of model output:
anything that does not validate is treated as an AI failure.
"""

from pydantic import BaseModel, Field
from typing import Literal
from enum import Enum


class IssueCategory(str, Enum):
    """Categories the classifier may assign to a civic issue."""
    ROADS = "Roads & Potholes"
    WATER = "Water Supply"
    ELECTRICITY = "Electricity"
    SANITATION = "Sanitation & Garbage"
    DRAINAGE = "Drainage & Flooding"
    TRAFFIC = "Traffic & Transportation"
    PARKS = "Parks & Public Spaces"
    NOISE = "Noise Pollution"
    OTHER = "Other"


Severity = Literal["Low", "Medium", "High", "Critical"]


class SeverityAssessment(BaseModel):
    severity: Severity = Field(..., description="Low, Medium, High or Critical")
    reasoning: str = Field(..., description="Brief explanation for the assessment")


class ImageAnalysis(BaseModel):
    verified: bool = Field(..., description="Whether the image shows the reported issue type")
    confidence: float = Field(..., ge=0, le=1, description="Confidence level (0.0-1.0)")
    details: str = Field(..., description="Brief description of what the image shows")


class ResolutionPrediction(BaseModel):
    estimated_days: int = Field(..., alias="estimatedDays", ge=1, le=30, description="Predicted days to resolve")
    confidence: float = Field(..., ge=0, le=1, description="Confidence level (0.0-1.0)")

    class Config:
        populate_by_name = True


# Request models

class IssueDescriptionRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=2000, description="Citizen's description of the issue")

    class Config:
        json_schema_extra = {
            "example": {"description": "Large pothole near Andheri station causing traffic jams."}
        }


class ImageAnalysisRequest(BaseModel):
    image_url: str = Field(..., min_length=1, max_length=2000, description="URL of the uploaded photo")
    issue_category: str = Field(..., min_length=1, max_length=100, description="Reported issue category")


class ResolutionTimeRequest(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    severity: str = Field(..., min_length=1, max_length=20)
    location: str = Field(..., min_length=1, max_length=200)


# Response models

class CategoryResponse(BaseModel):
    category: IssueCategory


class ResponseSuggestion(BaseModel):
    suggestion: str
