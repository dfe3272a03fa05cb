"""Tests for the fail-soft AI helpers."""

import logging

import pytest
import requests

from civic_connect.services.ai_plugin import AIProviderError
from civic_connect.services.ai_service import (
    AIService,
    DEFAULT_RESPONSE_SUGGESTION,
    extract_json_text,
    get_ai_service,
)

from tests.helpers import FakeGenerator


def service_returning(reply):
    return AIService(generator=FakeGenerator(reply=reply))


FAILING_SERVICES = [
    AIService(generator=None),
    AIService(generator=FakeGenerator(error=AIProviderError("no providers"))),
    AIService(generator=FakeGenerator(error=requests.Timeout("timed out"))),
    AIService(generator=FakeGenerator(error=RuntimeError("boom"))),
]


@pytest.mark.parametrize("reply, expected", [
    ("Water Supply", "Water Supply"),
    ("  roads & potholes\n", "Roads & Potholes"),
    ('"Electricity".', "Electricity"),
    ("Noise Pollution", "Noise Pollution"),
    ("Probably something about trees", "Other"),
])
def test_classify_issue_category(reply, expected):
    assert service_returning(reply).classify_issue_category("text") == expected


def test_unrecognised_category_logs_error(caplog):
    with caplog.at_level(logging.ERROR, logger="civic_connect.services.ai_service"):
        assert service_returning("Probably something about trees").classify_issue_category("x") == "Other"
    assert any(record.levelno == logging.ERROR and "Unrecognised issue category" in record.getMessage()
               for record in caplog.records)


def test_classify_prompt_carries_description_and_categories():
    generator = FakeGenerator(reply="Other")
    AIService(generator).classify_issue_category("Overflowing bins on Hill Road")
    prompt = generator.prompts[0]
    assert "Issue description: Overflowing bins on Hill Road" in prompt
    assert "- Sanitation & Garbage" in prompt
    assert "- Drainage & Flooding" in prompt


@pytest.mark.parametrize("service", FAILING_SERVICES)
def test_every_helper_falls_back_on_failure(service):
    assert service.classify_issue_category("x") == "Other"

    severity = service.assess_issue_severity("x")
    assert severity.severity == "Medium"
    assert severity.reasoning == "Default assessment due to processing error"

    assert service.generate_response_suggestion("x") == DEFAULT_RESPONSE_SUGGESTION

    image = service.analyze_issue_image("https://img.example/1.jpg", "Water Supply")
    assert image.verified is True
    assert image.confidence == 0.5
    assert image.details == "Image analysis unavailable"

    prediction = service.predict_resolution_time("Water Supply", "High", "Dadar")
    assert prediction.estimated_days == 7
    assert prediction.confidence == 0.5


def test_severity_parses_fenced_json():
    reply = '```json\n{"severity": "high", "reasoning": "Blocks an arterial road"}\n```'
    result = service_returning(reply).assess_issue_severity("Fallen tree")
    assert result.severity == "High"
    assert result.reasoning == "Blocks an arterial road"


@pytest.mark.parametrize("reply", [
    "not json at all",
    '{"severity": "Extreme", "reasoning": "?"}',
    '{"reasoning": "missing severity"}',
    '["High"]',
])
def test_severity_malformed_output_uses_default(reply):
    assert service_returning(reply).assess_issue_severity("x").severity == "Medium"


def test_image_analysis_parses_json():
    reply = '{"verified": false, "confidence": 0.9, "details": "Photo shows a clean street"}'
    result = service_returning(reply).analyze_issue_image("https://img.example/2.jpg", "Sanitation & Garbage")
    assert result.verified is False
    assert result.confidence == 0.9


def test_image_analysis_prompt_carries_url_and_category():
    generator = FakeGenerator(reply="{}")
    AIService(generator).analyze_issue_image("https://img.example/3.jpg", "Electricity")
    assert 'in the category "Electricity"' in generator.prompts[0]
    assert "The image URL is: https://img.example/3.jpg" in generator.prompts[0]


def test_image_analysis_out_of_range_confidence_uses_default():
    reply = '{"verified": true, "confidence": 1.5, "details": "pothole"}'
    result = service_returning(reply).analyze_issue_image("u", "c")
    assert result.details == "Image analysis unavailable"


def test_resolution_time_parses_camel_case():
    result = service_returning('{"estimatedDays": 3, "confidence": 0.8}').predict_resolution_time("a", "b", "c")
    assert result.estimated_days == 3
    assert result.confidence == 0.8
    assert result.model_dump(by_alias=True) == {"estimatedDays": 3, "confidence": 0.8}


def test_resolution_time_out_of_range_uses_default():
    result = service_returning('{"estimatedDays": 45, "confidence": 0.8}').predict_resolution_time("a", "b", "c")
    assert result.estimated_days == 7


def test_response_suggestion_is_stripped():
    reply = "\n  Dear citizen, thank you for your report.  \n"
    assert service_returning(reply).generate_response_suggestion("x") == "Dear citizen, thank you for your report."


def test_blank_response_suggestion_uses_default():
    assert service_returning("   ").generate_response_suggestion("x") == DEFAULT_RESPONSE_SUGGESTION


def test_defaults_are_not_shared_between_calls():
    service = AIService(generator=None)
    first = service.assess_issue_severity("x")
    first.reasoning = "changed"
    assert service.assess_issue_severity("x").reasoning == "Default assessment due to processing error"


@pytest.mark.parametrize("text, expected", [
    ('{"a": 1}', '{"a": 1}'),
    ('```json\n{"a": 1}\n```', '{"a": 1}'),
    ('Here you go:\n```\n{"a": 1}\n```\nThanks', '{"a": 1}'),
])
def test_extract_json_text(text, expected):
    assert extract_json_text(text) == expected


def test_get_ai_service_without_keys_returns_defaults(monkeypatch):
    from civic_connect.core.settings import settings
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)

    service = get_ai_service()
    assert service is get_ai_service()
    assert service.classify_issue_category("pothole") == "Other"
