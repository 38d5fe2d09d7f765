from __future__ import annotations
import re

from reviewlens.core.sentiment.config import DEFAULT_INTENSITY, IntensityConfig


class IntensityEstimator:
    """Labels score magnitude, nudged upward by surface emphasis cues.

    The cues only move the label; the overall score itself is untouched.
    """

    _re_caps = re.compile(r"[A-Z]{3,}")

    def __init__(self, config: IntensityConfig | None = None):
        self.cfg = config or DEFAULT_INTENSITY
        words = "|".join(re.escape(w) for w in self.cfg.intensifiers)
        self._re_intensifier = re.compile(rf"\b(?:{words})\b", re.IGNORECASE)

    def adjusted_magnitude(self, overall: float, text: str) -> float:
        text = text or ""
        magnitude = abs(overall)
        if text.count("!") > 1:
            magnitude += self.cfg.exclamation_bonus
        if self._re_intensifier.search(text):
            magnitude += self.cfg.intensifier_bonus
        if self._re_caps.search(text):
            magnitude += self.cfg.all_caps_bonus
        return magnitude

    def estimate(self, overall: float, text: str) -> str:
        # no lexicon signal at all: emphasis alone does not make a sentiment
        if overall == 0:
            return "neutral"
        m = self.adjusted_magnitude(overall, text)
        if m < self.cfg.neutral_below:
            return "neutral"
        if m < self.cfg.mild_below:
            return "mild"
        if m < self.cfg.moderate_below:
            return "moderate"
        return "strong"
