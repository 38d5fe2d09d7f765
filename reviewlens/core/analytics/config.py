from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


def default_suggestions() -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType(
        {
            "food": (
                "Review menu items receiving negative feedback",
                "Implement quality control measures for consistency",
                "Consider ingredient sourcing improvements",
                "Evaluate food preparation processes",
                "Train kitchen staff on quality standards",
            ),
            "service": (
                "Provide additional staff training on customer service",
                "Review staffing levels during peak hours",
                "Implement service recovery protocols",
                "Reduce wait times for seating and orders",
                "Improve communication between front and back of house",
            ),
            "ambiance": (
                "Evaluate noise levels and acoustics",
                "Review lighting for appropriate atmosphere",
                "Consider seating arrangement and comfort improvements",
                "Maintain cleanliness standards throughout dining areas",
                "Update décor elements that may appear dated",
            ),
            "value": (
                "Review pricing strategy compared to competitors",
                "Consider portion size adjustments",
                "Introduce value meal options or promotions",
                "Ensure menu pricing reflects perceived value",
                "Implement a customer loyalty program",
            ),
        }
    )


@dataclass(frozen=True)
class AnalyticsConfig:
    positive_above: float = 0.2
    negative_below: float = -0.2
    top_keywords: int = 15
    phrases_per_polarity: int = 5

    # improvement suggestions
    improvement_max_rating: int = 3
    improvement_window_months: int = 6
    category_issue_below: float = -0.2
    example_below: float = -0.3
    top_issues: int = 5
    examples_per_category: int = 2
    suggestions: Mapping[str, Tuple[str, ...]] = field(
        default_factory=default_suggestions
    )


DEFAULT_ANALYTICS = AnalyticsConfig()
