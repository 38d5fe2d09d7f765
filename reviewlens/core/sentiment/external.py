# reviewlens/core/sentiment/external.py
"""Optional remote (LLM) sentiment provider.

The remote side is untrusted: whatever it returns is coerced into a
SentimentProfile, and every failure mode comes back as a ``Fallback`` value
instead of an exception so the caller can always run local analysis.
"""
from __future__ import annotations
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, Union

from reviewlens.core.sentiment.config import CATEGORIES, INTENSITY_LEVELS
from reviewlens.core.sentiment.profile import (
    SentimentPhrase,
    SentimentProfile,
    as_finite_float,
)
from reviewlens.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

EXTERNAL_CONTRACT_VERSION = "1"
MAX_KEYWORDS = 10
MAX_PHRASES_PER_POLARITY = 3


@dataclass(frozen=True)
class Ok:
    profile: SentimentProfile


@dataclass(frozen=True)
class Fallback:
    reason: str
    detail: Optional[str] = None


ExternalResult = Union[Ok, Fallback]


class ExternalAnalyzer(Protocol):
    async def analyze(self, text: str) -> ExternalResult: ...


# ----------------------------
# Coercion of remote payloads
# ----------------------------


def _clamp(v: float) -> float:
    return round_half_up(max(-1.0, min(1.0, v)), 2)


def _coerce_phrases(raw: Any) -> List[SentimentPhrase]:
    if not isinstance(raw, list):
        return []
    positive: List[SentimentPhrase] = []
    negative: List[SentimentPhrase] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        sentiment = "negative" if item.get("sentiment") == "negative" else "positive"
        score = as_finite_float(item.get("score"))
        phrase = SentimentPhrase(
            text=str(item.get("text") or ""),
            sentiment=sentiment,
            score=_clamp(score) if score is not None else 0.0,
        )
        (negative if sentiment == "negative" else positive).append(phrase)
    return positive[:MAX_PHRASES_PER_POLARITY] + negative[:MAX_PHRASES_PER_POLARITY]


def coerce_external_payload(payload: Any) -> ExternalResult:
    """Shape an arbitrary decoded response into a profile. Never raises."""
    if not isinstance(payload, Mapping):
        return Fallback("malformed_response", f"expected object, got {type(payload).__name__}")

    overall = as_finite_float(payload.get("overall"))

    raw_categories = payload.get("categories")
    if not isinstance(raw_categories, Mapping):
        raw_categories = {}
    categories = {}
    for c in CATEGORIES:
        v = as_finite_float(raw_categories.get(c))
        categories[c] = _clamp(v) if v is not None else None

    raw_keywords = payload.get("keywords")
    keywords = (
        [k.strip() for k in raw_keywords if isinstance(k, str) and k.strip()]
        if isinstance(raw_keywords, list)
        else []
    )

    intensity = payload.get("intensity")
    profile = SentimentProfile(
        overall=_clamp(overall) if overall is not None else 0.0,
        intensity=intensity if intensity in INTENSITY_LEVELS else "neutral",
        categories=categories,
        keywords=tuple(keywords[:MAX_KEYWORDS]),
        sentiment_phrases=tuple(_coerce_phrases(payload.get("sentimentPhrases"))),
    )
    return Ok(profile)


_re_fence = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def extract_json_object(content: str) -> Any:
    """Decode the JSON object embedded in a chat completion.

    Raises ValueError when no object can be decoded.
    """
    s = _re_fence.sub("", (content or "").strip())
    start, end = s.find("{"), s.rfind("}")
    if start == -1 or end <= start:
        raise ValueError("no JSON object in response")
    return json.loads(s[start : end + 1])


# ----------------------------
# OpenAI adapter
# ----------------------------

SYSTEM_PROMPT = f"""You are a sentiment analysis expert for restaurant reviews.
Analyze the review and answer with JSON only (contract version {EXTERNAL_CONTRACT_VERSION}):
{{
  "overall": number between -1 and 1,
  "intensity": "neutral" | "mild" | "moderate" | "strong",
  "categories": {{
    "food": number between -1 and 1, or null when not discussed,
    "service": number or null,
    "ambiance": number or null,
    "value": number or null
  }},
  "keywords": up to {MAX_KEYWORDS} strings,
  "sentimentPhrases": [{{"text": string, "sentiment": "positive" | "negative", "score": number}}]
}}
Food covers quality, taste and presentation; service covers staff friendliness,
speed and attentiveness; ambiance covers atmosphere, noise, comfort and
cleanliness; value covers price relative to quality and portion size.
Return at most {MAX_PHRASES_PER_POLARITY} phrases per polarity."""


class OpenAIReviewAnalyzer:
    """Chat-completions backed analyzer, bounded by a hard timeout."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        timeout: float = 8.0,
        client: Any = None,
    ):
        if client is None:
            import openai

            # retries belong to the provider; one attempt per analysis
            client = openai.AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.client = client
        self.model = model
        self.timeout = timeout

    async def _complete(self, text: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f'Analyze this restaurant review: "{text}"'},
            ],
            temperature=0.1,
        )
        return response.choices[0].message.content or ""

    async def analyze(self, text: str) -> ExternalResult:
        try:
            content = await asyncio.wait_for(self._complete(text), timeout=self.timeout)
        except asyncio.TimeoutError:
            return Fallback("timeout", f"no answer within {self.timeout}s")
        except Exception as e:
            return Fallback("request_failed", str(e))

        if not content.strip():
            return Fallback("empty_response")

        try:
            payload = extract_json_object(content)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            return Fallback("malformed_response", str(e))

        return coerce_external_payload(payload)
