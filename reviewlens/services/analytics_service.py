# reviewlens/services/analytics_service.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Sequence

from reviewlens.core.analytics.compare import (
    MAX_COMPARE,
    MIN_COMPARE,
    comparison_category,
    rank_restaurants,
)
from reviewlens.core.analytics.config import DEFAULT_ANALYTICS, AnalyticsConfig
from reviewlens.core.analytics.improvements import ImprovementAdvisor
from reviewlens.core.analytics.periods import (
    PERIODS,
    InvalidPeriodError,
    months_back,
    resolve_period,
)
from reviewlens.core.analytics.records import RestaurantRecord, ReviewRecord
from reviewlens.core.analytics.snapshot import SentimentSnapshotBuilder
from reviewlens.messages.analysis_messages import (
    COMPARE_COUNT_INVALID,
    COMPARE_IDS_REQUIRED,
    IMPROVEMENTS_FORBIDDEN,
    INVALID_PERIOD,
    RESTAURANT_NOT_FOUND,
    RESTAURANTS_NOT_FOUND,
)
from reviewlens.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError
from reviewlens.utils.identity import Caller


class AnalyticsStore(Protocol):
    async def get_restaurant(self, restaurant_id: str) -> Optional[RestaurantRecord]: ...

    async def get_active_restaurants(
        self, ids: Sequence[str]
    ) -> List[RestaurantRecord]: ...

    async def list_public_reviews(
        self,
        restaurant_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[ReviewRecord]: ...


def parse_compare_ids(ids: Optional[str]) -> List[str]:
    """Split the comma-separated ``ids`` query value, dropping blanks and repeats."""
    if not ids or not ids.strip():
        raise BadRequestError(code="COMPARE_IDS_REQUIRED", message=COMPARE_IDS_REQUIRED)
    parsed: List[str] = []
    for raw in ids.split(","):
        rid = raw.strip()
        if rid and rid not in parsed:
            parsed.append(rid)
    if not MIN_COMPARE <= len(parsed) <= MAX_COMPARE:
        raise BadRequestError(code="COMPARE_COUNT_INVALID", message=COMPARE_COUNT_INVALID)
    return parsed


class AnalyticsService:
    """
    Read-side use cases for restaurant dashboards:
      - sentiment snapshot over a named period
      - improvement report (owner or admin only)
      - side-by-side comparison of aggregate ratings
    """

    def __init__(self, store: AnalyticsStore, config: AnalyticsConfig | None = None):
        self.store = store
        self.cfg = config or DEFAULT_ANALYTICS
        self.snapshots = SentimentSnapshotBuilder(self.cfg)
        self.advisor = ImprovementAdvisor(self.cfg)

    async def _require_restaurant(self, restaurant_id: str) -> RestaurantRecord:
        restaurant = await self.store.get_restaurant(restaurant_id)
        if restaurant is None:
            raise NotFoundError(code="RESTAURANT_NOT_FOUND", message=RESTAURANT_NOT_FOUND)
        return restaurant

    async def restaurant_sentiment(
        self,
        restaurant_id: str,
        period: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        try:
            window = resolve_period(period, now)
        except InvalidPeriodError:
            raise BadRequestError(
                code="INVALID_PERIOD",
                message=INVALID_PERIOD.format(periods=", ".join(PERIODS)),
            )

        await self._require_restaurant(restaurant_id)
        reviews = await self.store.list_public_reviews(
            restaurant_id, start=window.start, end=window.end
        )
        # stores may hand back a wider range; keep only the half-open window
        in_window = [r for r in reviews if window.contains(r.review_date)]
        return self.snapshots.build(in_window, window.label)

    async def improvements(
        self,
        restaurant_id: str,
        caller: Caller,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        restaurant = await self._require_restaurant(restaurant_id)
        if not (caller.is_admin or caller.user_id == restaurant.owner_id):
            raise ForbiddenError(
                code="IMPROVEMENTS_FORBIDDEN", message=IMPROVEMENTS_FORBIDDEN
            )

        now = now or datetime.now(timezone.utc)
        since = months_back(now, self.cfg.improvement_window_months)
        reviews = await self.store.list_public_reviews(restaurant_id, start=since)
        return self.advisor.build(reviews, now)

    async def compare(
        self, ids: Optional[str], category: Optional[str] = None
    ) -> Dict[str, Any]:
        wanted = parse_compare_ids(ids)
        restaurants = await self.store.get_active_restaurants(wanted)
        found = {r.id for r in restaurants}
        if any(rid not in found for rid in wanted):
            raise NotFoundError(
                code="RESTAURANTS_NOT_FOUND", message=RESTAURANTS_NOT_FOUND
            )

        resolved = comparison_category(category)
        return {
            "category": resolved,
            "restaurants": rank_restaurants(restaurants, resolved),
        }
