"""
AI Provider Registry.

Manages text-generation provider selection and fallback logic.
"""

from civic_connect.services.ai_plugin.base import AIProviderError, TextGenerator
from civic_connect.services.ai_plugin.gemini_provider import GeminiTextGenerator
from civic_connect.services.ai_plugin.openai_provider import OpenAITextGenerator
from civic_connect.core.settings import settings
from typing import Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class AIProviderRegistry(TextGenerator):
    """
    Registry for text-generation providers with fallback logic.

    Orders enabled providers with the configured AI_PROVIDER first and
    tries each in turn. The registry is itself a TextGenerator, so it can be
    handed to anything that expects one.
    """

    def __init__(self, providers: Optional[List[TextGenerator]] = None):
        if providers is not None:
            self.providers: List[TextGenerator] = [p for p in providers if p.is_enabled()]
        else:
            self.providers = []
            self._initialize_providers()

    def _initialize_providers(self):
        """Initialize available AI providers in priority order."""
        if not settings.AI_ENABLED:
            logger.info("⚠️ AI is disabled globally (AI_ENABLED=false), no providers registered")
            return

        candidates: Dict[str, TextGenerator] = {
            "openai": OpenAITextGenerator(),
            "gemini": GeminiTextGenerator(),
        }

        preferred = settings.AI_PROVIDER.strip().lower()
        if preferred not in candidates:
            logger.warning(f"Unknown AI_PROVIDER '{settings.AI_PROVIDER}', using default order")

        order = sorted(candidates, key=lambda name: name != preferred)
        for name in order:
            provider = candidates[name]
            if provider.is_enabled():
                self.providers.append(provider)
                logger.info(f"✅ {provider.get_model_info()['name']} registered")

        if not self.providers:
            logger.info("⚠️ No AI providers available (no API keys), AI helpers will use defaults")

    def is_enabled(self) -> bool:
        return bool(self.providers)

    def get_model_info(self) -> Dict[str, str]:
        if not self.providers:
            return {"name": "none", "version": ""}
        return self.providers[0].get_model_info()

    def get_timeout_seconds(self) -> float:
        return sum(p.get_timeout_seconds() for p in self.providers)

    def generate_text(self, prompt: str) -> str:
        """
        Generate text using the first provider that succeeds.

        Raises:
            AIProviderError: If no provider is registered or all of them fail
        """
        if not self.providers:
            raise AIProviderError("No AI provider available")

        errors = []
        for provider in self.providers:
            name = provider.get_model_info()["name"]
            try:
                text = provider.generate_text(prompt)
                logger.info(f"✅ AI generation successful using {name}")
                return text
            except AIProviderError as e:
                logger.warning(f"Provider {name} failed: {e}")
                errors.append(f"{name}: {e}")

        raise AIProviderError("All AI providers failed: " + "; ".join(errors))


# Global registry instance (singleton)
_registry: Optional[AIProviderRegistry] = None


def get_text_generator() -> AIProviderRegistry:
    """
    Get the shared provider registry.

    Returns:
        AIProviderRegistry: Lazily created on first use
    """
    global _registry
    if _registry is None:
        _registry = AIProviderRegistry()
    return _registry


def reset_text_generator() -> None:
    """Drop the shared registry so the next call re-reads settings."""
    global _registry
    _registry = None
