# reviewlens/services/review_service.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol
from uuid import uuid4

from reviewlens.core.analytics.aggregate_rating import (
    AggregateRatingUpdater,
    AggregateStore,
)
from reviewlens.core.analytics.records import RestaurantRecord, ReviewRecord
from reviewlens.core.config import settings
from reviewlens.core.sentiment.analyzer import (
    ReviewAnalyzer,
    analyzer_for,
)
from reviewlens.messages.analysis_messages import RESTAURANT_NOT_FOUND
from reviewlens.messages.review_messages import (
    INVALID_RATING,
    INVALID_VISIBILITY,
    REVIEW_ALREADY_EXISTS,
    REVIEW_FORBIDDEN,
    REVIEW_NOT_FOUND,
    REVIEW_TEXT_TOO_SHORT,
)
from reviewlens.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError
from reviewlens.utils.identity import Caller

logger = logging.getLogger(__name__)

SETTABLE_VISIBILITY = ("public", "private")
DELETED = "deleted"


class ReviewStore(AggregateStore, Protocol):
    async def get_restaurant(self, restaurant_id: str) -> Optional[RestaurantRecord]: ...

    async def get_review(self, review_id: str) -> Optional[ReviewRecord]: ...

    async def find_user_review(
        self, restaurant_id: str, user_id: str
    ) -> Optional[ReviewRecord]: ...

    async def add_review(self, review: ReviewRecord) -> ReviewRecord: ...

    async def update_review(
        self, review_id: str, changes: Dict[str, Any]
    ) -> Optional[ReviewRecord]: ...


def validate_rating(rating: Any) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        raise BadRequestError(code="INVALID_RATING", message=INVALID_RATING)
    return rating


def validate_text(text: Optional[str], min_length: int) -> str:
    cleaned = (text or "").strip()
    if len(cleaned) < min_length:
        raise BadRequestError(
            code="REVIEW_TEXT_TOO_SHORT",
            message=REVIEW_TEXT_TOO_SHORT.format(min_length=min_length),
        )
    return cleaned


class ReviewService:
    """
    The only writer of reviews. Every mutation:
      - validates input and caller rights
      - (re)analyzes text through the analyzer facade
      - persists, then recomputes the restaurant's aggregate rating
    """

    def __init__(
        self,
        store: ReviewStore,
        analyzer: ReviewAnalyzer,
        min_length: int | None = None,
    ):
        self.store = store
        self.analyzer = analyzer
        self.min_length = settings.MIN_REVIEW_LENGTH if min_length is None else min_length
        self.aggregates = AggregateRatingUpdater(store)

    async def _editable_review(self, review_id: str, caller: Caller) -> ReviewRecord:
        review = await self.store.get_review(review_id)
        if review is None or review.visibility == DELETED:
            raise NotFoundError(code="REVIEW_NOT_FOUND", message=REVIEW_NOT_FOUND)
        if not (caller.is_admin or caller.user_id == review.user_id):
            raise ForbiddenError(code="REVIEW_FORBIDDEN", message=REVIEW_FORBIDDEN)
        return review

    async def create_review(
        self,
        caller: Caller,
        restaurant_id: str,
        rating: Any,
        text: Optional[str],
        now: Optional[datetime] = None,
    ) -> ReviewRecord:
        restaurant = await self.store.get_restaurant(restaurant_id)
        if restaurant is None or not restaurant.is_active:
            raise NotFoundError(code="RESTAURANT_NOT_FOUND", message=RESTAURANT_NOT_FOUND)

        rating = validate_rating(rating)
        text = validate_text(text, self.min_length)

        existing = await self.store.find_user_review(restaurant_id, caller.user_id)
        if existing is not None and existing.visibility != DELETED:
            raise BadRequestError(
                code="REVIEW_ALREADY_EXISTS", message=REVIEW_ALREADY_EXISTS
            )

        sentiment = await self.analyzer.analyze(text)
        review_date = now or datetime.now(timezone.utc)

        if existing is not None:
            # a soft-deleted review still holds the (restaurant, user) slot
            saved = await self.store.update_review(
                existing.id,
                {
                    "rating": rating,
                    "text": text,
                    "sentiment": sentiment,
                    "visibility": "public",
                    "review_date": review_date,
                },
            )
        else:
            saved = await self.store.add_review(
                ReviewRecord(
                    id=str(uuid4()),
                    restaurant_id=restaurant_id,
                    user_id=caller.user_id,
                    rating=rating,
                    text=text,
                    review_date=review_date,
                    visibility="public",
                    sentiment=sentiment,
                )
            )

        logger.info(f"Review {saved.id} created for restaurant {restaurant_id}")
        await self.aggregates.recompute(restaurant_id)
        return saved

    async def update_review(
        self,
        caller: Caller,
        review_id: str,
        rating: Any = None,
        text: Optional[str] = None,
        visibility: Optional[str] = None,
    ) -> ReviewRecord:
        review = await self._editable_review(review_id, caller)

        changes: Dict[str, Any] = {}
        if rating is not None:
            changes["rating"] = validate_rating(rating)
        if text is not None:
            cleaned = validate_text(text, self.min_length)
            if cleaned != review.text:
                changes["text"] = cleaned
                changes["sentiment"] = await self.analyzer.analyze(cleaned)
        if visibility is not None:
            if visibility not in SETTABLE_VISIBILITY:
                raise BadRequestError(
                    code="INVALID_VISIBILITY", message=INVALID_VISIBILITY
                )
            changes["visibility"] = visibility

        if not changes:
            return review

        saved = await self.store.update_review(review_id, changes)
        if saved is None:
            raise NotFoundError(code="REVIEW_NOT_FOUND", message=REVIEW_NOT_FOUND)
        await self.aggregates.recompute(review.restaurant_id)
        return saved

    async def delete_review(self, caller: Caller, review_id: str) -> ReviewRecord:
        review = await self._editable_review(review_id, caller)
        saved = await self.store.update_review(review_id, {"visibility": DELETED})
        if saved is None:
            raise NotFoundError(code="REVIEW_NOT_FOUND", message=REVIEW_NOT_FOUND)
        logger.info(f"Review {review_id} soft-deleted")
        await self.aggregates.recompute(review.restaurant_id)
        return saved


def get_review_analyzer() -> ReviewAnalyzer:
    return analyzer_for(settings)
