# reviewlens/services/review_store.py
"""SQLAlchemy adapter for the review and restaurant stores.

Everything above this module works on ReviewRecord / RestaurantRecord values,
so tests can swap in an in-memory store through the FastAPI dependency.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reviewlens.core.analytics.aggregate_rating import AggregateRating
from reviewlens.core.analytics.records import RestaurantRecord, ReviewRecord
from reviewlens.core.database import get_db
from reviewlens.core.sentiment.config import CATEGORIES
from reviewlens.core.sentiment.profile import SentimentProfile
from reviewlens.models.db.restaurant import Restaurant
from reviewlens.models.db.review import Review

COUNTED_VISIBILITY = "public"


def restaurant_record(row: Restaurant) -> RestaurantRecord:
    return RestaurantRecord(
        id=row.id,
        name=row.name,
        owner_id=row.owner_id,
        cuisine=tuple(row.cuisine or ()),
        price_range=row.price_range,
        city=row.city,
        is_active=bool(row.is_active),
        rating_overall=row.rating_overall or 0.0,
        rating_categories={c: getattr(row, f"rating_{c}") or 0.0 for c in CATEGORIES},
        review_count=row.review_count or 0,
    )


def review_record(row: Review) -> ReviewRecord:
    return ReviewRecord(
        id=row.id,
        restaurant_id=row.restaurant_id,
        user_id=row.user_id,
        rating=row.rating,
        text=row.text,
        review_date=row.review_date,
        visibility=row.visibility,
        sentiment=SentimentProfile.from_payload(row.sentiment),
    )


class SqlReviewStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ---- restaurants ----

    async def get_restaurant(self, restaurant_id: str) -> Optional[RestaurantRecord]:
        row = await self.db.get(Restaurant, restaurant_id)
        return restaurant_record(row) if row else None

    async def get_active_restaurants(self, ids: Sequence[str]) -> List[RestaurantRecord]:
        result = await self.db.execute(
            select(Restaurant).where(Restaurant.id.in_(list(ids))).where(
                Restaurant.is_active.is_(True)
            )
        )
        return [restaurant_record(r) for r in result.scalars().all()]

    async def save_aggregate_rating(
        self, restaurant_id: str, aggregate: AggregateRating
    ) -> None:
        row = await self.db.get(Restaurant, restaurant_id)
        if row is None:
            return
        row.rating_overall = aggregate.overall
        for c in CATEGORIES:
            setattr(row, f"rating_{c}", aggregate.categories.get(c, 0.0))
        row.review_count = aggregate.review_count
        row.rating_updated_at = aggregate.last_updated
        await self.db.commit()

    # ---- reviews ----

    async def list_public_reviews(
        self,
        restaurant_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[ReviewRecord]:
        stmt = (
            select(Review)
            .where(Review.restaurant_id == restaurant_id)
            .where(Review.visibility == COUNTED_VISIBILITY)
        )
        if start is not None:
            stmt = stmt.where(Review.review_date >= start)
        if end is not None:
            stmt = stmt.where(Review.review_date < end)
        result = await self.db.execute(stmt.order_by(Review.review_date.desc()))
        return [review_record(r) for r in result.scalars().all()]

    async def list_counted_reviews(self, restaurant_id: str) -> List[ReviewRecord]:
        return await self.list_public_reviews(restaurant_id)

    async def get_review(self, review_id: str) -> Optional[ReviewRecord]:
        row = await self.db.get(Review, review_id)
        return review_record(row) if row else None

    async def find_user_review(
        self, restaurant_id: str, user_id: str
    ) -> Optional[ReviewRecord]:
        result = await self.db.execute(
            select(Review).filter_by(restaurant_id=restaurant_id, user_id=user_id)
        )
        row = result.scalars().first()
        return review_record(row) if row else None

    async def add_review(self, review: ReviewRecord) -> ReviewRecord:
        row = Review(
            id=review.id,
            restaurant_id=review.restaurant_id,
            user_id=review.user_id,
            rating=int(review.rating),
            text=review.text,
            review_date=review.review_date,
            sentiment=review.sentiment.to_payload(),
            visibility=review.visibility,
        )
        self.db.add(row)
        await self.db.commit()
        return review_record(row)

    async def update_review(self, review_id: str, changes: Dict[str, Any]) -> Optional[ReviewRecord]:
        row = await self.db.get(Review, review_id)
        if row is None:
            return None
        for field, value in changes.items():
            if field == "sentiment" and isinstance(value, SentimentProfile):
                value = value.to_payload()
            setattr(row, field, value)
        await self.db.commit()
        return review_record(row)


def get_review_store(db: AsyncSession = Depends(get_db)) -> SqlReviewStore:
    return SqlReviewStore(db)
