"""Local LLaMA completion provider implementation."""

import logging
from pathlib import Path

from issue_comment_summarizer.config import ConfigurationError
from issue_comment_summarizer.llm.provider import CompletionProvider

logger = logging.getLogger(__name__)


class LLaMAProvider(CompletionProvider):
    """Local LLaMA model provider.

    Requires llama-cpp-python to be installed:
        pip install "issue-comment-summarizer[llama]"

    The loaded model file decides what runs; the `model` argument of
    `create_completion` is only logged.
    """

    def __init__(self, model_path: Path | None, n_ctx: int = 4096) -> None:
        """Initialize the LLaMA provider.

        Args:
            model_path: Path to the model file.
            n_ctx: Context window size.

        Raises:
            ConfigurationError: If model path is not provided.
            ImportError: If llama-cpp-python is not installed.
        """
        if not model_path:
            raise ConfigurationError("LLaMA model path is required")

        try:
            from llama_cpp import Llama
        except ImportError as e:
            raise ImportError(
                "llama-cpp-python is required for the LLaMA provider. "
                'Install it with: pip install "issue-comment-summarizer[llama]"'
            ) from e

        logger.info(f"Loading LLaMA model from: {model_path}")

        self.llm = Llama(model_path=str(model_path), n_ctx=n_ctx, verbose=False)

        logger.info("LLaMA model loaded successfully")

    def create_completion(self, *, model: str, prompt: str, max_tokens: int) -> str:
        logger.debug("Requesting local completion", extra={"requested_model": model})

        result = self.llm(prompt, max_tokens=max_tokens)

        content = result["choices"][0]["text"]
        logger.debug(f"Generated {len(content)} characters")

        return content
