from __future__ import annotations
from typing import Any, Dict, List, Sequence

from reviewlens.core.analytics.records import RestaurantRecord
from reviewlens.core.sentiment.config import CATEGORIES
from reviewlens.utils.numbers import round_half_up

MIN_COMPARE = 2
MAX_COMPARE = 5
COMPARE_CATEGORIES = ("overall", *CATEGORIES)


def comparison_category(category: str | None) -> str:
    # unknown categories compare on the overall rating
    return category if category in COMPARE_CATEGORIES else "overall"


def rank_restaurants(
    restaurants: Sequence[RestaurantRecord], category: str = "overall"
) -> List[Dict[str, Any]]:
    category = comparison_category(category)
    rows = []
    for r in restaurants:
        if category == "overall":
            score = r.rating_overall
        else:
            score = r.rating_categories.get(category) or 0.0
        rows.append(
            {
                "id": r.id,
                "name": r.name,
                "cuisine": list(r.cuisine),
                "priceRange": r.price_range,
                "location": r.city,
                "score": round_half_up(float(score or 0.0), 1),
                "reviewCount": r.review_count,
            }
        )
    rows.sort(key=lambda row: row["score"], reverse=True)
    return rows
