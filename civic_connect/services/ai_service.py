"""
AI Helper Service - prompt-wrapping helpers for civic issue triage.

DESIGN PRINCIPLES (CRITICAL):
- AI output is advisory only
- Every helper FAILS SOFT: on any error it logs and returns a fixed default
- The text generator is injected, so helpers are testable without network calls
- System must work even if AI is disabled or no API key is configured

SCOPE OF AI:
✅ Classify issue category
✅ Assess severity
✅ Draft a response for officials
✅ Check a photo against the reported category
✅ Estimate resolution time
"""

from civic_connect.models.ai import (
    ImageAnalysis,
    IssueCategory,
    ResolutionPrediction,
    SeverityAssessment,
)
from civic_connect.services.ai_plugin.base import AIProviderError, TextGenerator
from civic_connect.services.ai_plugin.registry import get_text_generator
from typing import Dict, Optional
import json
import logging

logger = logging.getLogger(__name__)


CATEGORY_LIST = "\n".join(f"- {category.value}" for category in IssueCategory)

DEFAULT_CATEGORY = IssueCategory.OTHER.value
DEFAULT_SEVERITY = SeverityAssessment(
    severity="Medium",
    reasoning="Default assessment due to processing error",
)
DEFAULT_RESPONSE_SUGGESTION = (
    "Thank you for reporting this issue. "
    "We have received your report and will investigate promptly."
)
DEFAULT_IMAGE_ANALYSIS = ImageAnalysis(
    verified=True,
    confidence=0.5,
    details="Image analysis unavailable",
)
DEFAULT_RESOLUTION = ResolutionPrediction(estimated_days=7, confidence=0.5)


def extract_json_text(text: str) -> str:
    """Strip markdown code fences that models like to wrap JSON in."""
    text = text.strip()
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]
    return text.strip()


def parse_json_object(text: str) -> Dict:
    parsed = json.loads(extract_json_text(text))
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def match_category(text: str) -> Optional[str]:
    """Map free-text model output onto a known category (case-insensitive)."""
    cleaned = text.strip().strip("\"'`.").strip().lower()
    for category in IssueCategory:
        if category.value.lower() == cleaned:
            return category.value
    return None


class AIService:
    """
    AI-assisted helpers for reported civic issues.

    Each public method returns a usable value no matter what the generator
    does; failures are logged and replaced with the documented default.
    """

    def __init__(self, generator: Optional[TextGenerator] = None):
        self.generator = generator

    def _generate(self, prompt: str) -> str:
        if self.generator is None:
            raise AIProviderError("No text generator configured")
        return self.generator.generate_text(prompt)

    def classify_issue_category(self, description: str) -> str:
        """
        Classify an issue description into one of the IssueCategory values.

        Returns:
            Category name; "Other" on failure or unrecognised output
        """
        prompt = f"""Classify the following civic issue into one of these categories:
{CATEGORY_LIST}

Issue description: {description}

Return only the category name without any additional text."""

        try:
            text = self._generate(prompt)
        except Exception as e:
            logger.error(f"Error classifying issue: {e}")
            return DEFAULT_CATEGORY

        category = match_category(text or "")
        if category is None:
            logger.error(f"Unrecognised issue category from AI: {(text or '').strip()[:80]!r}")
            return DEFAULT_CATEGORY
        return category

    def assess_issue_severity(self, description: str) -> SeverityAssessment:
        """
        Assess severity on a Low / Medium / High / Critical scale.

        Returns:
            SeverityAssessment; Medium with a default reasoning on failure
        """
        prompt = f"""Assess the severity of the following civic issue on a scale of Low, Medium, High, or Critical.
Consider factors like public safety, impact on daily life, number of people affected, and urgency.

Issue description: {description}

Provide your assessment in JSON format with two fields:
- severity: one of "Low", "Medium", "High", or "Critical"
- reasoning: a brief explanation for this assessment (max 100 characters)"""

        try:
            parsed = parse_json_object(self._generate(prompt))
            if isinstance(parsed.get("severity"), str):
                parsed["severity"] = parsed["severity"].strip().capitalize()
            return SeverityAssessment.model_validate(parsed)
        except Exception as e:
            logger.error(f"Error assessing issue severity: {e}")
            return DEFAULT_SEVERITY.model_copy()

    def generate_response_suggestion(self, issue_description: str) -> str:
        """Draft a reply an official could send to the reporting citizen."""
        prompt = f"""Generate a professional, empathetic response from a government official to a citizen who reported the following civic issue:

"{issue_description}"

The response should:
1. Acknowledge the issue
2. Express appreciation for reporting
3. Outline general next steps
4. Be concise (max 150 words)
5. Be formal but friendly"""

        try:
            text = self._generate(prompt).strip()
            if not text:
                raise ValueError("Empty response suggestion")
            return text
        except Exception as e:
            logger.error(f"Error generating response suggestion: {e}")
            return DEFAULT_RESPONSE_SUGGESTION

    def analyze_issue_image(self, image_url: str, issue_category: str) -> ImageAnalysis:
        """
        Check whether a photo shows evidence of the reported issue type.

        Returns:
            ImageAnalysis; verified with 0.5 confidence on failure, so a
            broken AI backend never blocks a report
        """
        prompt = f"""Analyze this image of a reported civic issue in the category "{issue_category}".
The image URL is: {image_url}

Determine if the image shows evidence of the reported issue type.

Provide your analysis in JSON format with three fields:
- verified: boolean indicating if the image shows evidence of the reported issue type
- confidence: number between 0 and 1 indicating confidence level
- details: brief description of what you see in the image (max 100 characters)"""

        try:
            parsed = parse_json_object(self._generate(prompt))
            return ImageAnalysis.model_validate(parsed)
        except Exception as e:
            logger.error(f"Error analyzing issue image: {e}")
            return DEFAULT_IMAGE_ANALYSIS.model_copy()

    def predict_resolution_time(self, category: str, severity: str, location: str) -> ResolutionPrediction:
        """Estimate days to resolution; 7 days at 0.5 confidence on failure."""
        prompt = f"""Based on historical civic issue resolution data, predict how many days it might take to resolve an issue with these characteristics:
- Category: {category}
- Severity: {severity}
- Location: {location}

Provide your prediction in JSON format with two fields:
- estimatedDays: number of days (integer between 1 and 30)
- confidence: confidence level (number between 0 and 1)"""

        try:
            parsed = parse_json_object(self._generate(prompt))
            return ResolutionPrediction.model_validate(parsed)
        except Exception as e:
            logger.error(f"Error predicting resolution time: {e}")
            return DEFAULT_RESOLUTION.model_copy()


# Global AI service instance (singleton)
_ai_service: Optional[AIService] = None


def get_ai_service() -> AIService:
    """
    Get or create the global AI service instance.

    Returns:
        AIService: Backed by the configured provider registry
    """
    global _ai_service
    if _ai_service is None:
        _ai_service = AIService(generator=get_text_generator())
    return _ai_service
