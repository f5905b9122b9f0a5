"""Tokenizers used to measure prompts and split comment payloads."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import tiktoken


class Tokenizer(Protocol):
    """Encode text to token ids and back.

    Must match the completion model's tokenization for budgets to be accurate.
    """

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...

    def is_char_boundary(self, tokens: Sequence[int]) -> bool:
        """Return True if `tokens` decode to whole characters only."""
        ...


class TiktokenTokenizer:
    """Tokenizer backed by a tiktoken encoding.

    Byte-level BPE encodings may spread one character (emoji, CJK) over
    several tokens, so not every token offset is a valid place to cut.
    """

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        self.encoding_name = encoding_name
        self._encoding = tiktoken.get_encoding(encoding_name)

    def encode(self, text: str) -> list[int]:
        # Comment bodies are user content; treat special-token text as plain text.
        return self._encoding.encode(text, disallowed_special=())

    def decode(self, tokens: Sequence[int]) -> str:
        return self._encoding.decode(list(tokens))

    def is_char_boundary(self, tokens: Sequence[int]) -> bool:
        try:
            self._encoding.decode_bytes(list(tokens)).decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def count(self, text: str) -> int:
        return len(self.encode(text))
