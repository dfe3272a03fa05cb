"""
AI Provider Base Interface.

Defines the contract for text-generation providers.
All AI providers must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Dict
import logging

logger = logging.getLogger(__name__)


class AIProviderError(Exception):
    """Raised when a provider cannot produce text for a prompt."""


class TextGenerator(ABC):
    """
    Abstract base class for text-generation providers.

    Unlike the AI helpers built on top of it, a provider DOES raise:
    callers decide what the safe default is.
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """
        Check if this AI provider is enabled.

        Returns:
            True if provider is enabled and ready, False otherwise
        """
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, str]:
        """
        Get model information (name, version).

        Returns:
            Dict with 'name' and 'version' keys
        """
        pass

    @abstractmethod
    def get_timeout_seconds(self) -> float:
        """
        Get timeout for AI inference (in seconds).

        Returns:
            Timeout in seconds (e.g., 10.0 for 10 seconds)
        """
        pass

    @abstractmethod
    def generate_text(self, prompt: str) -> str:
        """
        Generate a completion for a natural-language prompt.

        Args:
            prompt: Full prompt text

        Returns:
            Raw model output text

        Raises:
            AIProviderError: On transport failure, non-200 status or empty output
        """
        pass
