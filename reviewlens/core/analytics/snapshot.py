# reviewlens/core/analytics/snapshot.py
"""Dashboard statistics over the public reviews of one time window."""
from __future__ import annotations
import math
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from reviewlens.core.analytics.config import DEFAULT_ANALYTICS, AnalyticsConfig
from reviewlens.core.analytics.periods import as_utc
from reviewlens.core.analytics.records import ReviewRecord
from reviewlens.core.sentiment.config import CATEGORIES
from reviewlens.core.sentiment.profile import SentimentPhrase
from reviewlens.utils.numbers import round_half_up


def safe_pct(n: int, d: int) -> float:
    if not d:
        return 0.0
    v = (n / d) * 100.0
    return 0.0 if not math.isfinite(v) else round_half_up(v, 1)


def _mean_or_none(series: pd.Series, digits: int) -> Optional[float]:
    v = series.mean()
    return None if pd.isna(v) else round_half_up(float(v), digits)


def reviews_frame(reviews: Sequence[ReviewRecord]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "id": r.id,
                "rating": float(r.rating),
                "overall": float(r.sentiment.overall or 0.0),
                "review_date": as_utc(r.review_date),
                **{c: r.sentiment.categories.get(c) for c in CATEGORIES},
            }
            for r in reviews
        ],
        columns=["id", "rating", "overall", "review_date", *CATEGORIES],
    )
    for c in CATEGORIES:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df["review_date"] = pd.to_datetime(df["review_date"], utc=True)
    return df


def empty_rating_distribution() -> Dict[int, int]:
    return {star: 0 for star in range(1, 6)}


class SentimentSnapshotBuilder:
    def __init__(self, config: AnalyticsConfig | None = None):
        self.cfg = config or DEFAULT_ANALYTICS

    def empty(self, period_label: str) -> Dict[str, Any]:
        return {
            "total": 0,
            "periodLabel": period_label,
            "overallSentiment": 0.0,
            "categories": {c: None for c in CATEGORIES},
            "sentimentDistribution": {"positive": 0.0, "neutral": 0.0, "negative": 0.0},
            "ratingDistribution": empty_rating_distribution(),
            "keywords": [],
            "sentimentPhrases": {"positive": [], "negative": []},
            "trends": [],
        }

    def build(self, reviews: Sequence[ReviewRecord], period_label: str) -> Dict[str, Any]:
        if not reviews:
            return self.empty(period_label)

        df = reviews_frame(reviews)
        return {
            "total": int(len(df)),
            "periodLabel": period_label,
            "overallSentiment": round_half_up(float(df["overall"].mean()), 2),
            "categories": {c: _mean_or_none(df[c], 2) for c in CATEGORIES},
            "sentimentDistribution": self.sentiment_distribution(df),
            "ratingDistribution": self.rating_distribution(df),
            "keywords": self.keyword_cloud(reviews),
            "sentimentPhrases": self.representative_phrases(reviews),
            "trends": self.monthly_trends(df),
        }

    def sentiment_distribution(self, df: pd.DataFrame) -> Dict[str, float]:
        total = int(len(df))
        positive = int((df["overall"] > self.cfg.positive_above).sum())
        negative = int((df["overall"] < self.cfg.negative_below).sum())
        neutral = total - positive - negative
        return {
            "positive": safe_pct(positive, total),
            "neutral": safe_pct(neutral, total),
            "negative": safe_pct(negative, total),
        }

    @staticmethod
    def rating_distribution(df: pd.DataFrame) -> Dict[int, int]:
        dist = empty_rating_distribution()
        for rating in df["rating"]:
            star = int(round_half_up(rating))
            # out-of-range ratings are dropped rather than clamped
            if star in dist:
                dist[star] += 1
        return dist

    def keyword_cloud(self, reviews: Sequence[ReviewRecord]) -> List[Dict[str, Any]]:
        counts = Counter(k for r in reviews for k in r.sentiment.keywords)
        return [
            {"keyword": k, "count": int(n)}
            for k, n in counts.most_common(self.cfg.top_keywords)
        ]

    def representative_phrases(
        self, reviews: Sequence[ReviewRecord]
    ) -> Dict[str, List[Dict[str, Any]]]:
        phrases: List[SentimentPhrase] = [
            p for r in reviews for p in r.sentiment.sentiment_phrases
        ]
        positive = sorted(
            (p for p in phrases if p.sentiment == "positive"),
            key=lambda p: p.score,
            reverse=True,
        )
        negative = sorted(
            (p for p in phrases if p.sentiment == "negative"), key=lambda p: p.score
        )
        n = self.cfg.phrases_per_polarity
        return {
            "positive": [p.to_payload() for p in positive[:n]],
            "negative": [p.to_payload() for p in negative[:n]],
        }

    @staticmethod
    def monthly_trends(df: pd.DataFrame) -> List[Dict[str, Any]]:
        months = df.assign(period=df["review_date"].dt.strftime("%Y-%m"))
        grouped = months.groupby("period", sort=True).agg(
            reviewCount=("rating", "size"),
            avgRating=("rating", "mean"),
            avgSentiment=("overall", "mean"),
        )
        return [
            {
                "period": str(period),
                "avgSentiment": round_half_up(float(row["avgSentiment"]), 2),
                "avgRating": round_half_up(float(row["avgRating"]), 1),
                "reviewCount": int(row["reviewCount"]),
            }
            for period, row in grouped.iterrows()
        ]
