from __future__ import annotations
from typing import Sequence

from nltk.sentiment.vader import VaderConstants

from reviewlens.core.sentiment.config import DEFAULT_LEXICON, LexiconConfig

_VADER = VaderConstants()


class LexiconScorer:
    """Maps a token sequence to a polarity score in [-1, 1].

    Pure function of the tokens, so it is reused for whole reviews and for
    single sentences alike. Negation is not modelled.
    """

    def __init__(self, config: LexiconConfig | None = None):
        self.cfg = config or DEFAULT_LEXICON

    def raw_sum(self, tokens: Sequence[str]) -> float:
        weights = self.cfg.weights
        return float(sum(weights.get(t, 0.0) for t in tokens or ()))

    def score(self, tokens: Sequence[str]) -> float:
        total = self.raw_sum(tokens)
        if total == 0:
            return 0.0
        return max(-1.0, min(1.0, _VADER.normalize(total, alpha=self.cfg.alpha)))
