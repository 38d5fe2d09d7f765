from __future__ import annotations
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from reviewlens.core.analytics.config import DEFAULT_ANALYTICS, AnalyticsConfig
from reviewlens.core.analytics.periods import as_utc, months_back
from reviewlens.core.analytics.records import ReviewRecord
from reviewlens.core.analytics.snapshot import safe_pct
from reviewlens.core.sentiment.config import CATEGORIES


class ImprovementAdvisor:
    """Rule-based improvement report built from recent negative reviews."""

    def __init__(self, config: AnalyticsConfig | None = None):
        self.cfg = config or DEFAULT_ANALYTICS

    @staticmethod
    def empty() -> Dict[str, Any]:
        return {
            "improvementAreas": [],
            "commonIssues": {},
            "suggestionsByCategory": {},
            "reviewCount": 0,
            "reviewExamples": {},
        }

    def negative_reviews(
        self, reviews: Sequence[ReviewRecord], now: Optional[datetime] = None
    ) -> List[ReviewRecord]:
        """Low-rated, negatively-scored reviews from the recent window, newest first."""
        since = months_back(now or datetime.now(timezone.utc), self.cfg.improvement_window_months)
        picked = [
            r
            for r in reviews
            if r.rating <= self.cfg.improvement_max_rating
            and r.sentiment.overall < 0
            and as_utc(r.review_date) >= since
        ]
        return sorted(picked, key=lambda r: as_utc(r.review_date), reverse=True)

    def _below(self, review: ReviewRecord, category: str, threshold: float) -> bool:
        score = review.sentiment.categories.get(category)
        return score is not None and score < threshold

    def build(
        self, reviews: Sequence[ReviewRecord], now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        negative = self.negative_reviews(reviews, now)
        if not negative:
            return self.empty()

        counts = {c: 0 for c in CATEGORIES}
        issue_pool: Dict[str, List[str]] = {c: [] for c in CATEGORIES}
        for review in negative:
            for c in CATEGORIES:
                if self._below(review, c, self.cfg.category_issue_below):
                    counts[c] += 1
                    issue_pool[c].extend(review.sentiment.keywords)

        areas = sorted(
            (
                {
                    "category": c,
                    "count": counts[c],
                    "percentage": safe_pct(counts[c], len(negative)),
                }
                for c in CATEGORIES
                if counts[c] > 0
            ),
            key=lambda a: a["count"],
            reverse=True,
        )
        flagged = [a["category"] for a in areas]

        common_issues: Dict[str, List[Dict[str, Any]]] = {}
        for c in flagged:
            pool = issue_pool[c]
            if not pool:
                continue
            common_issues[c] = [
                {"issue": issue, "count": int(n), "percentage": safe_pct(n, len(pool))}
                for issue, n in Counter(pool).most_common(self.cfg.top_issues)
            ]

        examples: Dict[str, List[Dict[str, Any]]] = {}
        for c in flagged:
            picked = [
                r for r in negative if self._below(r, c, self.cfg.example_below)
            ][: self.cfg.examples_per_category]
            if picked:
                examples[c] = [
                    {
                        "id": r.id,
                        "text": r.text,
                        "rating": r.rating,
                        "date": r.review_date,
                        "sentiment": r.sentiment.categories.get(c),
                    }
                    for r in picked
                ]

        return {
            "improvementAreas": areas,
            "commonIssues": common_issues,
            "suggestionsByCategory": {
                c: list(self.cfg.suggestions.get(c, ())) for c in flagged
            },
            "reviewCount": len(negative),
            "reviewExamples": examples,
        }
