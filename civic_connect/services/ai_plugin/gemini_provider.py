"""
Gemini AI Provider - Google Gemini generateContent over HTTP.

Requires GEMINI_API_KEY in environment variables.
"""

from civic_connect.services.ai_plugin.base import AIProviderError, TextGenerator
from civic_connect.core.settings import settings
from typing import Dict, Optional
import logging
import requests

logger = logging.getLogger(__name__)


class GeminiTextGenerator(TextGenerator):
    """
    Google Gemini API provider.

    Disabled when no API key is configured.
    """

    API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    MODEL_VERSION = "1.0"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.timeout_seconds = timeout_seconds or settings.AI_TIMEOUT_SECONDS
        self.enabled = bool(self.api_key and self.api_key.strip())

        if self.enabled:
            logger.info(f"✅ Gemini AI Provider initialized: {self.model}")
        else:
            logger.info("⚠️ Gemini AI Provider disabled: No API key configured")

    def is_enabled(self) -> bool:
        """Check if provider is enabled (has API key)."""
        return self.enabled

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": self.model,
            "version": self.MODEL_VERSION
        }

    def get_timeout_seconds(self) -> float:
        return self.timeout_seconds

    def generate_text(self, prompt: str) -> str:
        if not self.enabled:
            raise AIProviderError("Gemini API key not configured")

        url = f"{self.API_BASE_URL}/{self.model}:generateContent?key={self.api_key}"

        payload = {
            "contents": [{
                "parts": [{"text": prompt}]
            }],
            "generationConfig": {"temperature": settings.AI_TEMPERATURE}
        }

        try:
            response = requests.post(
                url,
                json=payload,
                timeout=self.timeout_seconds
            )
        except requests.RequestException as e:
            # The URL carries the key; keep it out of the message
            raise AIProviderError(f"Gemini request failed: {type(e).__name__}") from e

        if response.status_code != 200:
            raise AIProviderError(f"Gemini API returned status {response.status_code}: {response.text}")

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AIProviderError(f"Unexpected Gemini response shape: {e}") from e

        if not text.strip():
            raise AIProviderError("Gemini API returned an empty completion")

        return text
