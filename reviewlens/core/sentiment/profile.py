from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from reviewlens.core.sentiment.config import CATEGORIES, INTENSITY_LEVELS


@dataclass(frozen=True)
class SentimentPhrase:
    text: str
    sentiment: str  # "positive" | "negative"
    score: float

    def to_payload(self) -> Dict[str, Any]:
        return {"text": self.text, "sentiment": self.sentiment, "score": self.score}


@dataclass(frozen=True)
class SentimentProfile:
    """Per-review sentiment summary persisted alongside the review."""

    overall: float = 0.0
    intensity: str = "neutral"
    categories: Mapping[str, Optional[float]] = field(
        default_factory=lambda: {c: None for c in CATEGORIES}
    )
    keywords: Tuple[str, ...] = ()
    sentiment_phrases: Tuple[SentimentPhrase, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "intensity": self.intensity,
            "categories": {c: self.categories.get(c) for c in CATEGORIES},
            "keywords": list(self.keywords),
            "sentimentPhrases": [p.to_payload() for p in self.sentiment_phrases],
        }

    @classmethod
    def empty(cls) -> "SentimentProfile":
        return cls()

    @classmethod
    def from_payload(cls, payload: Any) -> "SentimentProfile":
        """Rebuild a profile from its stored JSON form.

        Stored rows are trusted to be well-formed, but missing keys and rows
        written before a field existed still load with defaults.
        """
        if not isinstance(payload, Mapping):
            return cls.empty()

        cats = payload.get("categories") or {}
        categories: Dict[str, Optional[float]] = {}
        for c in CATEGORIES:
            v = cats.get(c) if isinstance(cats, Mapping) else None
            categories[c] = as_finite_float(v)

        phrases: List[SentimentPhrase] = []
        for p in payload.get("sentimentPhrases") or []:
            if not isinstance(p, Mapping):
                continue
            phrases.append(
                SentimentPhrase(
                    text=str(p.get("text") or ""),
                    sentiment=(
                        "negative" if p.get("sentiment") == "negative" else "positive"
                    ),
                    score=as_finite_float(p.get("score")) or 0.0,
                )
            )

        intensity = payload.get("intensity")
        return cls(
            overall=as_finite_float(payload.get("overall")) or 0.0,
            intensity=intensity if intensity in INTENSITY_LEVELS else "neutral",
            categories=categories,
            keywords=tuple(
                str(k) for k in payload.get("keywords") or [] if isinstance(k, str)
            ),
            sentiment_phrases=tuple(phrases),
        )


def as_finite_float(v: Any) -> Optional[float]:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    f = float(v)
    return f if math.isfinite(f) else None
