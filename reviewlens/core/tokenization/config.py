from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizationConfig:
    token_pattern: str = r"\w+"
    # punctuation is replaced by whitespace before tokenizing
    punctuation_pattern: str = r"[^\w\s]"
    sentence_boundary: str = r"(?<=[.!?])\s+"
    lowercase: bool = True


DEFAULT_TOKENIZATION = TokenizationConfig()
