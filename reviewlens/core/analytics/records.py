from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from reviewlens.core.sentiment.profile import SentimentProfile


@dataclass(frozen=True)
class ReviewRecord:
    """What the aggregation code needs to know about one stored review."""

    id: str
    restaurant_id: str
    rating: float
    review_date: datetime
    text: str = ""
    user_id: Optional[str] = None
    visibility: str = "public"
    sentiment: SentimentProfile = field(default_factory=SentimentProfile)


@dataclass(frozen=True)
class RestaurantRecord:
    id: str
    name: str
    owner_id: Optional[str] = None
    cuisine: tuple = ()
    price_range: Optional[str] = None
    city: Optional[str] = None
    is_active: bool = True
    rating_overall: float = 0.0
    rating_categories: dict = field(default_factory=dict)
    review_count: int = 0
