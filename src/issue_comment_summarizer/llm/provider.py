"""Abstract base class for completion providers."""

from abc import ABC, abstractmethod


class CompletionProvider(ABC):
    """Abstract base class for text-completion backends.

    The summarizer only ever needs a single operation, so this interface
    is intentionally narrow; test doubles implement just `create_completion`.
    """

    @abstractmethod
    def create_completion(self, *, model: str, prompt: str, max_tokens: int) -> str:
        """Generate a completion for a prompt.

        Args:
            model: Model identifier requested by the caller.
            prompt: The input prompt.
            max_tokens: Maximum tokens to generate.

        Returns:
            Text of the first generated candidate.
        """
        pass
