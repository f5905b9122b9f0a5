"""Token-bounded chunking of prompt payloads."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from issue_comment_summarizer.config import ConfigurationError
from issue_comment_summarizer.tokenizer import Tokenizer

# Context window of the target model family.
MODEL_MAX_TOKENS = 4096


def _split_point(chunk: list[int], is_boundary: Callable[[Sequence[int]], bool]) -> int:
    """Return the longest prefix length of `chunk` that ends on a character boundary.

    Falls back to the whole chunk when no prefix does (a character wider than the budget).
    """

    for end in range(len(chunk), 0, -1):
        if is_boundary(chunk[:end]):
            return end
    return len(chunk)


def chunk_tokens(
    tokens: Sequence[int],
    budget: int,
    *,
    is_boundary: Callable[[Sequence[int]], bool] | None = None,
) -> list[list[int]]:
    """Split a token sequence into the fewest contiguous chunks of at most `budget` tokens.

    With `is_boundary`, a full chunk is closed at its last character boundary and
    the trailing tokens start the next chunk.

    Raises:
        ConfigurationError: If `budget` is not positive.
    """

    if budget <= 0:
        raise ConfigurationError(f"Token budget must be positive, got {budget}")

    chunks: list[list[int]] = []
    chunk: list[int] = []
    for token in tokens:
        if len(chunk) < budget:
            chunk.append(token)
            continue

        end = len(chunk) if is_boundary is None else _split_point(chunk, is_boundary)
        chunks.append(chunk[:end])
        chunk = chunk[end:] + [token]

    if chunk:
        chunks.append(chunk)
    return chunks


def generate_prompt_chunks(payload: str, reserved_tokens: int, tokenizer: Tokenizer) -> list[str]:
    """Split `payload` into text chunks that fit the model context window.

    Each chunk holds at most `MODEL_MAX_TOKENS - reserved_tokens` tokens and never
    cuts through a character. An empty payload yields no chunks.

    Raises:
        ConfigurationError: If `reserved_tokens` leaves no room in the context window.
    """

    budget = MODEL_MAX_TOKENS - reserved_tokens
    if budget <= 0:
        raise ConfigurationError(
            f"Reserving {reserved_tokens} tokens leaves no room in the "
            f"{MODEL_MAX_TOKENS}-token context window"
        )

    chunks = chunk_tokens(
        tokenizer.encode(payload), budget, is_boundary=tokenizer.is_char_boundary
    )
    return [tokenizer.decode(chunk) for chunk in chunks]
