"""OpenAI completion provider implementation."""

import logging

from openai import OpenAI

from issue_comment_summarizer.config import ConfigurationError
from issue_comment_summarizer.llm.provider import CompletionProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(CompletionProvider):
    """OpenAI text-completion provider."""

    def __init__(self, api_key: str | None, client: OpenAI | None = None) -> None:
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key.
            client: Pre-built client, used instead of constructing one.

        Raises:
            ConfigurationError: If neither an API key nor a client is provided.
        """
        if client is None and not api_key:
            raise ConfigurationError("OpenAI API key is required")

        self.client = client or OpenAI(api_key=api_key)

        logger.info("OpenAI provider initialized")

    def create_completion(self, *, model: str, prompt: str, max_tokens: int) -> str:
        """Generate a completion using the OpenAI completions endpoint."""
        logger.debug(f"Requesting completion for prompt: {prompt[:100]}...")

        response = self.client.completions.create(
            model=model,
            prompt=prompt,
            max_tokens=max_tokens,
        )

        content = response.choices[0].text or ""
        logger.debug(f"Generated {len(content)} characters")

        return content
