"""
AI Plug-in Architecture.

Pluggable text-generation providers behind a single generate_text call.
Providers raise on failure; the AI helpers built on them fail soft.
"""

from civic_connect.services.ai_plugin.base import AIProviderError, TextGenerator
from civic_connect.services.ai_plugin.gemini_provider import GeminiTextGenerator
from civic_connect.services.ai_plugin.openai_provider import OpenAITextGenerator
from civic_connect.services.ai_plugin.registry import AIProviderRegistry, get_text_generator, reset_text_generator

__all__ = [
    "AIProviderError",
    "AIProviderRegistry",
    "GeminiTextGenerator",
    "OpenAITextGenerator",
    "TextGenerator",
    "get_text_generator",
    "reset_text_generator",
]
