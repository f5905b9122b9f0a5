"""Factory for creating completion providers."""

import logging

from issue_comment_summarizer.config import ConfigurationError, SummarizerSettings
from issue_comment_summarizer.llm.llama_provider import LLaMAProvider
from issue_comment_summarizer.llm.openai_provider import OpenAIProvider
from issue_comment_summarizer.llm.provider import CompletionProvider

logger = logging.getLogger(__name__)


class CompletionProviderFactory:
    """Factory for creating completion provider instances."""

    @staticmethod
    def create(settings: SummarizerSettings) -> CompletionProvider:
        """Create a completion provider based on settings.

        Args:
            settings: Summarizer settings specifying the provider.

        Returns:
            Configured completion provider instance.

        Raises:
            ConfigurationError: If the provider is unsupported or misconfigured.
        """
        logger.info(f"Creating completion provider: {settings.llm_provider}")

        if settings.llm_provider == "openai":
            return OpenAIProvider(settings.openai_api_key)
        elif settings.llm_provider == "llama":
            return LLaMAProvider(settings.llama_model_path)
        else:
            raise ConfigurationError(f"Unsupported completion provider: {settings.llm_provider}")
