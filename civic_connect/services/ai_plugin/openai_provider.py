"""
OpenAI Provider - chat-completions text generation over HTTP.

Requires OPENAI_API_KEY in environment variables.
"""

from civic_connect.services.ai_plugin.base import AIProviderError, TextGenerator
from civic_connect.core.settings import settings
from typing import Dict, Optional
import logging
import requests

logger = logging.getLogger(__name__)


class OpenAITextGenerator(TextGenerator):
    """
    OpenAI chat-completions provider.

    Disabled when no API key is configured.
    """

    API_URL = "https://api.openai.com/v1/chat/completions"
    MODEL_VERSION = "v1"
    SYSTEM_PROMPT = "You are a helpful assistant for a civic issue reporting platform in Mumbai."

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[float] = None
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.timeout_seconds = timeout_seconds or settings.AI_TIMEOUT_SECONDS
        self.enabled = bool(self.api_key and self.api_key.strip())

        if self.enabled:
            logger.info(f"✅ OpenAI provider initialized: {self.model}")
        else:
            logger.info("⚠️ OpenAI provider disabled: No API key configured")

    def is_enabled(self) -> bool:
        """Check if provider is enabled (has API key)."""
        return self.enabled

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": f"openai-{self.model}",
            "version": self.MODEL_VERSION
        }

    def get_timeout_seconds(self) -> float:
        return self.timeout_seconds

    def generate_text(self, prompt: str) -> str:
        """Call the chat-completions endpoint and return the first choice."""
        if not self.enabled:
            raise AIProviderError("OpenAI API key not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            "temperature": settings.AI_TEMPERATURE,
        }

        try:
            response = requests.post(
                self.API_URL,
                headers=headers,
                json=payload,
                timeout=self.timeout_seconds
            )
        except requests.RequestException as e:
            raise AIProviderError(f"OpenAI request failed: {e}") from e

        if response.status_code != 200:
            raise AIProviderError(f"OpenAI API returned status {response.status_code}: {response.text}")

        try:
            data = response.json()
            text = data["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AIProviderError(f"Unexpected OpenAI response shape: {e}") from e

        if not text.strip():
            raise AIProviderError("OpenAI API returned an empty completion")

        return text
