from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from reviewlens.core.sentiment.config import (
    CATEGORIES,
    DEFAULT_CATEGORIES,
    CategoryConfig,
)
from reviewlens.core.sentiment.scorer import LexiconScorer
from reviewlens.core.tokenization.base import Tokenizer
from reviewlens.utils.numbers import round_half_up


class CategoryClassifier:
    """Attributes sentence-level sentiment to food/service/ambiance/value.

    A sentence counts toward every category whose keywords it mentions, so
    one sentence may feed several categories. A category nobody mentioned
    stays None, which is different from a mentioned-but-neutral 0.0.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        scorer: LexiconScorer,
        config: CategoryConfig | None = None,
    ):
        self.tokenizer = tokenizer
        self.scorer = scorer
        self.cfg = config or DEFAULT_CATEGORIES

    def _matches(self, tokens: Sequence[str], keywords: Sequence[str]) -> bool:
        if self.cfg.match_mode == "exact":
            return any(t in keywords for t in tokens)
        return any(t in kw or kw in t for kw in keywords for t in tokens)

    def matched_categories(self, tokens: Sequence[str]) -> List[str]:
        return [
            c
            for c in CATEGORIES
            if self._matches(tokens, self.cfg.keywords.get(c, ()))
        ]

    def classify(self, sentences: Sequence[str]) -> Dict[str, Optional[float]]:
        sums = {c: 0.0 for c in CATEGORIES}
        counts = {c: 0 for c in CATEGORIES}

        for sentence in sentences:
            tokens = self.tokenizer.tokenize(sentence)
            if not tokens:
                continue
            score = self.scorer.score(tokens)
            for c in self.matched_categories(tokens):
                sums[c] += score
                counts[c] += 1

        return {
            c: (round_half_up(sums[c] / counts[c], 2) if counts[c] else None)
            for c in CATEGORIES
        }
