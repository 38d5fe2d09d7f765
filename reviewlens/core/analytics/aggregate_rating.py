from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Protocol, Sequence

from reviewlens.core.analytics.records import ReviewRecord
from reviewlens.core.sentiment.config import CATEGORIES
from reviewlens.utils.numbers import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateRating:
    overall: float = 0.0
    categories: Dict[str, float] = field(
        default_factory=lambda: {c: 0.0 for c in CATEGORIES}
    )
    review_count: int = 0
    last_updated: Optional[datetime] = None

    def to_payload(self) -> Dict:
        return {
            "overall": self.overall,
            "categories": dict(self.categories),
            "reviewCount": self.review_count,
            "lastUpdated": self.last_updated,
        }


def sentiment_to_stars(score: float) -> float:
    """Map a [-1, 1] sentiment score onto the [0, 5] rating scale."""
    return (score + 1) * 2.5


def compute_aggregate_rating(
    reviews: Sequence[ReviewRecord], now: Optional[datetime] = None
) -> AggregateRating:
    """Full recomputation over the reviews currently counted for a restaurant."""
    now = now or datetime.now(timezone.utc)
    if not reviews:
        return AggregateRating(last_updated=now)

    overall = round_half_up(sum(r.rating for r in reviews) / len(reviews), 1)

    categories: Dict[str, float] = {}
    for c in CATEGORIES:
        stars = [
            sentiment_to_stars(r.sentiment.categories.get(c))
            for r in reviews
            if r.sentiment.categories.get(c) is not None
        ]
        categories[c] = round_half_up(sum(stars) / len(stars), 1) if stars else 0.0

    return AggregateRating(
        overall=overall,
        categories=categories,
        review_count=len(reviews),
        last_updated=now,
    )


class AggregateStore(Protocol):
    async def list_counted_reviews(self, restaurant_id: str) -> Sequence[ReviewRecord]: ...

    async def save_aggregate_rating(
        self, restaurant_id: str, aggregate: AggregateRating
    ) -> None: ...


class AggregateRatingUpdater:
    """Recomputes a restaurant's rollup after any review mutation.

    Read-compute-write with no locking: two concurrent mutations on the same
    restaurant resolve as last writer wins.
    """

    def __init__(self, store: AggregateStore):
        self.store = store

    async def recompute(self, restaurant_id: str) -> AggregateRating:
        reviews = await self.store.list_counted_reviews(restaurant_id)
        aggregate = compute_aggregate_rating(reviews)
        await self.store.save_aggregate_rating(restaurant_id, aggregate)
        logger.info(
            f"Aggregate rating for restaurant {restaurant_id} recomputed: "
            f"overall={aggregate.overall} from {aggregate.review_count} reviews"
        )
        return aggregate
