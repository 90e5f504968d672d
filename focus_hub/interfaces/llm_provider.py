"""
LLM provider interface.

Defines the contract for generative text access.
Implementations: Gemini API
"""

from abc import ABC, abstractmethod


class ILLMProvider(ABC):
    """Abstract interface for LLM providers."""

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Generate a completion for a single-turn prompt.

        Returns:
            The generated text

        Raises:
            LLMError: If the provider call fails or returns nothing
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the human-readable model name.

        Returns:
            Model name string for logging/display
        """
        pass
