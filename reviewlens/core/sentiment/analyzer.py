# reviewlens/core/sentiment/analyzer.py
from __future__ import annotations
import hashlib
import logging
from dataclasses import dataclass
from typing import Optional

from reviewlens.core.config import Settings
from reviewlens.core.sentiment.categories import CategoryClassifier
from reviewlens.core.sentiment.config import (
    CategoryConfig,
    IntensityConfig,
    KeywordConfig,
    LexiconConfig,
)
from reviewlens.core.sentiment.external import (
    ExternalAnalyzer,
    ExternalResult,
    Fallback,
    Ok,
    OpenAIReviewAnalyzer,
)
from reviewlens.core.sentiment.intensity import IntensityEstimator
from reviewlens.core.sentiment.keywords import KeywordExtractor
from reviewlens.core.sentiment.profile import SentimentProfile
from reviewlens.core.sentiment.scorer import LexiconScorer
from reviewlens.core.tokenization.config import TokenizationConfig
from reviewlens.core.tokenization.tokenizer import DefaultTokenizer
from reviewlens.utils.numbers import round_half_up

logger = logging.getLogger(__name__)


# ----------------------------
# Local lexicon pipeline
# ----------------------------


class LocalReviewAnalyzer:
    """Tokenize, score, attribute categories, extract keywords and phrases.

    Deterministic and free of hidden state: the same text always yields the
    same profile, and empty or signal-free text yields a neutral profile.
    """

    def __init__(
        self,
        lexicon: LexiconConfig | None = None,
        tokenization: TokenizationConfig | None = None,
        categories: CategoryConfig | None = None,
        keywords: KeywordConfig | None = None,
        intensity: IntensityConfig | None = None,
    ):
        self.tokenizer = DefaultTokenizer(tokenization)
        self.scorer = LexiconScorer(lexicon)
        self.classifier = CategoryClassifier(self.tokenizer, self.scorer, categories)
        self.extractor = KeywordExtractor(self.tokenizer, self.scorer, keywords)
        self.intensity = IntensityEstimator(intensity)

    def analyze(self, text: str) -> SentimentProfile:
        text = text or ""
        tokens = self.tokenizer.tokenize(text)
        sentences = self.tokenizer.split_sentences(text)

        overall = self.scorer.score(tokens)
        return SentimentProfile(
            overall=round_half_up(overall, 2),
            intensity=self.intensity.estimate(overall, text),
            categories=self.classifier.classify(sentences),
            keywords=tuple(self.extractor.keywords(tokens)),
            sentiment_phrases=tuple(self.extractor.phrases(sentences)),
        )


# ----------------------------
# Facade
# ----------------------------


@dataclass(frozen=True)
class AnalysisOutcome:
    profile: SentimentProfile
    source: str  # "external" | "local"
    fallback_reason: Optional[str] = None


class ReviewAnalyzer:
    """Asks the external analyzer first, falls back to local analysis.

    No retries happen here; a single external attempt per call.
    """

    def __init__(
        self,
        local: LocalReviewAnalyzer | None = None,
        external: ExternalAnalyzer | None = None,
        disabled: bool = False,
    ):
        self.local = local or LocalReviewAnalyzer()
        self.external = external
        # a configured provider switched off by EXTERNAL_ANALYZER_ENABLED
        self.disabled = disabled

    async def _attempt_external(self, text: str) -> ExternalResult:
        if self.external is None:
            return Fallback("disabled" if self.disabled else "not_configured")
        try:
            return await self.external.analyze(text)
        except Exception as e:
            # adapters should report Fallback themselves; guard anyway
            return Fallback("request_failed", str(e))

    async def analyze_with_source(self, text: str) -> AnalysisOutcome:
        result = await self._attempt_external(text)
        if isinstance(result, Ok):
            return AnalysisOutcome(profile=result.profile, source="external")

        if result.reason not in ("not_configured", "disabled"):
            logger.warning(
                f"External sentiment analyzer unavailable ({result.reason}"
                f"{': ' + result.detail if result.detail else ''}); using local analysis"
            )
        return AnalysisOutcome(
            profile=self.local.analyze(text),
            source="local",
            fallback_reason=result.reason,
        )

    async def analyze(self, text: str) -> SentimentProfile:
        return (await self.analyze_with_source(text)).profile


# ----------------------------
# Factory with caching
# ----------------------------

_analyzer_cache: dict[str, ReviewAnalyzer] = {}


def analyzer_for(cfg: Settings) -> ReviewAnalyzer:
    use_external = bool(cfg.EXTERNAL_ANALYZER_ENABLED and cfg.OPENAI_API_KEY)
    disabled = bool(cfg.OPENAI_API_KEY) and not cfg.EXTERNAL_ANALYZER_ENABLED
    key_hash = hashlib.sha256((cfg.OPENAI_API_KEY or "").encode()).hexdigest()[:12]
    key = (
        f"{use_external}|{disabled}|{key_hash}|{cfg.OPENAI_MODEL}"
        f"|{cfg.OPENAI_TIMEOUT_SECONDS}|{cfg.LEXICON_SOURCE}"
    )
    if key in _analyzer_cache:
        return _analyzer_cache[key]

    lexicon = LexiconConfig.from_vader() if cfg.LEXICON_SOURCE == "vader" else None
    external = None
    if use_external:
        external = OpenAIReviewAnalyzer(
            api_key=cfg.OPENAI_API_KEY,
            model=cfg.OPENAI_MODEL,
            timeout=cfg.OPENAI_TIMEOUT_SECONDS,
        )
    inst = ReviewAnalyzer(
        local=LocalReviewAnalyzer(lexicon=lexicon),
        external=external,
        disabled=disabled,
    )
    _analyzer_cache[key] = inst
    return inst
