from __future__ import annotations
from collections import Counter
from typing import List, Sequence

from reviewlens.core.sentiment.config import DEFAULT_KEYWORDS, KeywordConfig
from reviewlens.core.sentiment.profile import SentimentPhrase
from reviewlens.core.sentiment.scorer import LexiconScorer
from reviewlens.core.tokenization.base import Tokenizer
from reviewlens.utils.numbers import round_half_up


class KeywordExtractor:
    """Frequency-ranked content words and the most extreme sentences."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        scorer: LexiconScorer,
        config: KeywordConfig | None = None,
    ):
        self.tokenizer = tokenizer
        self.scorer = scorer
        self.cfg = config or DEFAULT_KEYWORDS

    def keywords(self, tokens: Sequence[str]) -> List[str]:
        content = [
            t
            for t in tokens
            if len(t) >= self.cfg.min_length and t not in self.cfg.stopwords
        ]
        # most_common is stable, so equal counts keep first-seen order
        return [w for w, _ in Counter(content).most_common(self.cfg.top_k)]

    def phrases(self, sentences: Sequence[str]) -> List[SentimentPhrase]:
        positive: List[SentimentPhrase] = []
        negative: List[SentimentPhrase] = []

        for sentence in sentences:
            score = self.scorer.score(self.tokenizer.tokenize(sentence))
            if abs(score) <= self.cfg.phrase_threshold:
                continue
            phrase = SentimentPhrase(
                text=sentence,
                sentiment="positive" if score > 0 else "negative",
                score=round_half_up(score, 2),
            )
            (positive if score > 0 else negative).append(phrase)

        n = self.cfg.phrases_per_polarity
        positive.sort(key=lambda p: p.score, reverse=True)
        negative.sort(key=lambda p: p.score)
        return positive[:n] + negative[:n]
