from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from reviewlens.core.analytics.aggregate_rating import AggregateRating
from reviewlens.core.analytics.periods import as_utc
from reviewlens.core.analytics.records import RestaurantRecord, ReviewRecord
from reviewlens.core.sentiment.analyzer import LocalReviewAnalyzer, ReviewAnalyzer
from reviewlens.core.sentiment.profile import SentimentProfile


class InMemoryReviewStore:
    """Dict-backed stand-in for SqlReviewStore."""

    def __init__(self):
        self.restaurants: Dict[str, RestaurantRecord] = {}
        self.reviews: Dict[str, ReviewRecord] = {}
        self.saved_aggregates: Dict[str, AggregateRating] = {}
        self.review_queries = 0

    def add_restaurant(self, **kwargs) -> RestaurantRecord:
        restaurant = RestaurantRecord(**kwargs)
        self.restaurants[restaurant.id] = restaurant
        return restaurant

    def put_review(self, **kwargs) -> ReviewRecord:
        review = ReviewRecord(**kwargs)
        self.reviews[review.id] = review
        return review

    async def get_restaurant(self, restaurant_id):
        return self.restaurants.get(restaurant_id)

    async def get_active_restaurants(self, ids):
        return [
            self.restaurants[i]
            for i in ids
            if i in self.restaurants and self.restaurants[i].is_active
        ]

    async def save_aggregate_rating(self, restaurant_id, aggregate):
        self.saved_aggregates[restaurant_id] = aggregate
        restaurant = self.restaurants.get(restaurant_id)
        if restaurant is not None:
            self.restaurants[restaurant_id] = replace(
                restaurant,
                rating_overall=aggregate.overall,
                rating_categories=dict(aggregate.categories),
                review_count=aggregate.review_count,
            )

    async def list_public_reviews(
        self,
        restaurant_id,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[ReviewRecord]:
        self.review_queries += 1
        picked = [
            r
            for r in self.reviews.values()
            if r.restaurant_id == restaurant_id
            and r.visibility == "public"
            and (start is None or as_utc(r.review_date) >= start)
            and (end is None or as_utc(r.review_date) < end)
        ]
        return sorted(picked, key=lambda r: as_utc(r.review_date), reverse=True)

    async def list_counted_reviews(self, restaurant_id):
        return await self.list_public_reviews(restaurant_id)

    async def get_review(self, review_id):
        return self.reviews.get(review_id)

    async def find_user_review(self, restaurant_id, user_id):
        for r in self.reviews.values():
            if r.restaurant_id == restaurant_id and r.user_id == user_id:
                return r
        return None

    async def add_review(self, review):
        self.reviews[review.id] = review
        return review

    async def update_review(self, review_id, changes: Dict[str, Any]):
        review = self.reviews.get(review_id)
        if review is None:
            return None
        updated = replace(review, **changes)
        self.reviews[review_id] = updated
        return updated


def profile(
    overall: float = 0.0,
    food=None,
    service=None,
    ambiance=None,
    value=None,
    keywords=(),
    phrases=(),
) -> SentimentProfile:
    return SentimentProfile(
        overall=overall,
        intensity="neutral",
        categories={"food": food, "service": service, "ambiance": ambiance, "value": value},
        keywords=tuple(keywords),
        sentiment_phrases=tuple(phrases),
    )


@pytest.fixture
def now():
    return datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def days_ago(now):
    def _days_ago(n: int) -> datetime:
        return now - timedelta(days=n)

    return _days_ago


@pytest.fixture
def store():
    return InMemoryReviewStore()


@pytest.fixture
def local_analyzer():
    return ReviewAnalyzer(local=LocalReviewAnalyzer(), external=None)


@pytest.fixture
def client(store, local_analyzer):
    from reviewlens.main import app
    from reviewlens.middlewares.security import limiter
    from reviewlens.services.review_service import get_review_analyzer
    from reviewlens.services.review_store import get_review_store

    app.dependency_overrides[get_review_store] = lambda: store
    app.dependency_overrides[get_review_analyzer] = lambda: local_analyzer
    limiter.enabled = False

    yield TestClient(app)

    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture
def make_profile():
    return profile
