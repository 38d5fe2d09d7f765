from datetime import datetime, timezone

import pytest

from reviewlens.core.analytics.records import ReviewRecord
from reviewlens.core.analytics.snapshot import SentimentSnapshotBuilder
from reviewlens.core.sentiment.profile import SentimentPhrase

builder = SentimentSnapshotBuilder()

def review(i, rating, when, sentiment):
    return ReviewRecord(
        id=f"rev-{i}",
        restaurant_id="r1",
        user_id=f"u{i}",
        rating=rating,
        review_date=when,
        sentiment=sentiment,
    )

def test_empty_window_is_zeroed():
    data = builder.build([], "Last 30 days")
    assert data["total"] == 0
    assert data["periodLabel"] == "Last 30 days"
    assert data["overallSentiment"] == 0.0
    assert data["sentimentDistribution"] == {"positive": 0.0, "neutral": 0.0, "negative": 0.0}
    assert data["ratingDistribution"] == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert data["keywords"] == []
    assert data["trends"] == []
    assert all(v is None for v in data["categories"].values())

def test_snapshot_statistics(make_profile):
    reviews = [
        review(1, 5, datetime(2024, 5, 2, tzinfo=timezone.utc),
               make_profile(0.8, food=0.9, keywords=["pasta", "wine"])),
        review(2, 4, datetime(2024, 5, 20, tzinfo=timezone.utc),
               make_profile(0.1, food=0.3, service=-0.2, keywords=["pasta"])),
        review(3, 1, datetime(2024, 4, 10, tzinfo=timezone.utc),
               make_profile(-0.6, service=-0.8, keywords=["wait", "pasta"])),
    ]
    data = builder.build(reviews, "Last 6 months")

    assert data["total"] == 3
    assert data["overallSentiment"] == 0.1
    assert data["categories"] == {
        "food": 0.6,
        "service": -0.5,
        "ambiance": None,
        "value": None,
    }
    assert data["sentimentDistribution"] == {
        "positive": 33.3,
        "neutral": 33.3,
        "negative": 33.3,
    }
    assert data["ratingDistribution"] == {1: 1, 2: 0, 3: 0, 4: 1, 5: 1}
    assert data["keywords"][0] == {"keyword": "pasta", "count": 3}
    assert [t["period"] for t in data["trends"]] == ["2024-04", "2024-05"]
    assert data["trends"][1] == {
        "period": "2024-05",
        "avgSentiment": 0.45,
        "avgRating": 4.5,
        "reviewCount": 2,
    }

def test_distribution_sums_to_about_one_hundred(make_profile, days_ago):
    scores = [0.9, 0.5, 0.21, 0.2, 0.0, -0.2, -0.21]
    reviews = [review(i, 3, days_ago(i), make_profile(s)) for i, s in enumerate(scores)]
    dist = builder.build(reviews, "x")["sentimentDistribution"]
    assert dist == {"positive": 42.9, "neutral": 42.9, "negative": 14.3}
    assert sum(dist.values()) == pytest.approx(100.0, abs=0.2)

def test_rating_histogram_rounds_and_drops_out_of_range(make_profile, days_ago):
    ratings = [4.5, 2.4, 0.2, 6, 1]
    reviews = [review(i, r, days_ago(i), make_profile()) for i, r in enumerate(ratings)]
    dist = builder.build(reviews, "x")["ratingDistribution"]
    assert dist == {1: 1, 2: 1, 3: 0, 4: 0, 5: 1}

def test_representative_phrases_across_reviews(make_profile, days_ago):
    def phrase(text, score):
        return SentimentPhrase(text, "positive" if score > 0 else "negative", score)

    reviews = [
        review(i, 3, days_ago(i), make_profile(phrases=[phrase(f"p{i}", 0.3 + i / 10)]))
        for i in range(7)
    ] + [
        review(10, 1, days_ago(10), make_profile(phrases=[phrase("bad", -0.4), phrase("worse", -0.9)]))
    ]
    phrases = builder.build(reviews, "x")["sentimentPhrases"]
    assert [p["text"] for p in phrases["positive"]] == ["p6", "p5", "p4", "p3", "p2"]
    assert [p["text"] for p in phrases["negative"]] == ["worse", "bad"]

def test_keyword_cloud_capped(make_profile, days_ago):
    reviews = [
        review(i, 3, days_ago(i), make_profile(keywords=[f"kw{i}"])) for i in range(20)
    ]
    assert len(builder.build(reviews, "x")["keywords"]) == 15


def test_half_values_round_up(make_profile):
    when = datetime(2024, 5, 2, tzinfo=timezone.utc)
    reviews = [
        review(1, 4, when, make_profile(0.25, food=0.25)),
        review(2, 5, when, make_profile(0.0, food=0.0)),
    ]
    data = builder.build(reviews, "x")
    assert data["overallSentiment"] == 0.13
    assert data["categories"]["food"] == 0.13
    assert data["trends"][0]["avgSentiment"] == 0.13
    assert data["trends"][0]["avgRating"] == 4.5
