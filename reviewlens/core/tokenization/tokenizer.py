from __future__ import annotations
import re
from typing import List

from nltk.tokenize import RegexpTokenizer

from reviewlens.core.tokenization.base import Tokenizer
from reviewlens.core.tokenization.config import (
    DEFAULT_TOKENIZATION,
    TokenizationConfig,
)


class DefaultTokenizer(Tokenizer):
    """Adapter: lowercases, strips punctuation and tokenizes with NLTK.

    Stop-words are kept; keyword extraction filters them later.
    """

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or DEFAULT_TOKENIZATION
        self._word_tokenizer = RegexpTokenizer(self.cfg.token_pattern)
        self._re_punct = re.compile(self.cfg.punctuation_pattern)
        self._re_boundary = re.compile(self.cfg.sentence_boundary)

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        s = str(text)
        if self.cfg.lowercase:
            s = s.lower()
        return self._re_punct.sub(" ", s)

    def tokenize(self, text: str) -> List[str]:
        s = self.normalize(text)
        if not s.strip():
            return []
        return self._word_tokenizer.tokenize(s)

    def split_sentences(self, text: str) -> List[str]:
        if not text:
            return []
        parts = self._re_boundary.split(str(text))
        return [p.strip() for p in parts if p and p.strip()]
