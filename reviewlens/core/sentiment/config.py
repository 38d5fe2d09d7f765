from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Literal, Mapping, Tuple

from reviewlens.core.sentiment.lexicon import DEFAULT_WEIGHTS, vader_weights

CATEGORIES: Tuple[str, ...] = ("food", "service", "ambiance", "value")
INTENSITY_LEVELS: Tuple[str, ...] = ("neutral", "mild", "moderate", "strong")


def _frozen(mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class LexiconConfig:
    weights: Mapping[str, float] = field(
        default_factory=lambda: _frozen(DEFAULT_WEIGHTS)
    )
    # VADER-style normalization constant: score = s / sqrt(s*s + alpha)
    alpha: float = 15.0
    source: str = "builtin"

    @classmethod
    def from_mapping(
        cls, weights: Mapping[str, float], alpha: float = 15.0, source: str = "custom"
    ) -> "LexiconConfig":
        return cls(
            weights=_frozen({str(k).lower(): float(v) for k, v in weights.items()}),
            alpha=alpha,
            source=source,
        )

    @classmethod
    def from_vader(cls) -> "LexiconConfig":
        return cls.from_mapping(vader_weights(), source="vader")


def default_category_keywords() -> Mapping[str, Tuple[str, ...]]:
    return _frozen(
        {
            "food": (
                "food", "dish", "menu", "taste", "delicious", "flavor", "meal",
                "eat", "cuisine", "ingredient", "cook", "chef", "dessert",
                "drink", "appetizer", "entree", "breakfast", "lunch", "dinner",
                "portion", "spicy", "sweet", "savory", "bitter", "salty",
                "juicy", "tender", "crispy", "fresh", "stale",
            ),
            "service": (
                "service", "staff", "waiter", "waitress", "server", "attentive",
                "polite", "friendly", "rude", "slow", "quick", "prompt",
                "reservation", "manager", "attention", "helpful", "efficient",
                "professional", "courteous",
            ),
            "ambiance": (
                "ambiance", "atmosphere", "decor", "interior", "music", "noise",
                "quiet", "loud", "comfort", "seating", "table", "chair",
                "light", "dark", "cozy", "crowd", "view", "design", "layout",
                "clean", "dirty", "spacious", "cramped",
            ),
            "value": (
                "price", "value", "expensive", "cheap", "affordable", "worth",
                "cost", "overpriced", "bargain", "money", "bill", "payment",
                "reasonable", "pricy",
            ),
        }
    )


@dataclass(frozen=True)
class CategoryConfig:
    keywords: Mapping[str, Tuple[str, ...]] = field(
        default_factory=default_category_keywords
    )
    # "substring": token contains keyword or keyword contains token
    # "exact": token equals keyword
    match_mode: Literal["substring", "exact"] = "substring"


DEFAULT_STOPWORDS: FrozenSet[str] = frozenset(
    """
    i me my myself we our ours ourselves you your yours yourself yourselves
    he him his himself she her hers herself it its itself they them their
    theirs themselves what which who whom this that these those am is are was
    were be been being have has had having do does did doing a an the and but
    if or because as until while of at by for with about against between into
    through during before after above below to from up down in out on off
    over under again further then once here there when where why how all any
    both each few more most other some such no nor not only own same so than
    too very s t can will just don should now
    """.split()
)


@dataclass(frozen=True)
class KeywordConfig:
    stopwords: FrozenSet[str] = DEFAULT_STOPWORDS
    min_length: int = 3
    top_k: int = 10
    phrase_threshold: float = 0.3
    phrases_per_polarity: int = 3


@dataclass(frozen=True)
class IntensityConfig:
    # upper bounds for neutral / mild / moderate; anything above is strong
    neutral_below: float = 0.2
    mild_below: float = 0.4
    moderate_below: float = 0.7
    exclamation_bonus: float = 0.1
    intensifier_bonus: float = 0.15
    all_caps_bonus: float = 0.1
    intensifiers: Tuple[str, ...] = (
        "very",
        "really",
        "extremely",
        "absolutely",
        "incredibly",
    )


DEFAULT_LEXICON = LexiconConfig()
DEFAULT_CATEGORIES = CategoryConfig()
DEFAULT_KEYWORDS = KeywordConfig()
DEFAULT_INTENSITY = IntensityConfig()
