import asyncio

import pytest

from reviewlens.core.analytics.aggregate_rating import (
    AggregateRatingUpdater,
    compute_aggregate_rating,
    sentiment_to_stars,
)
from reviewlens.core.analytics.records import ReviewRecord


def review(i, rating, sentiment, days_ago, visibility="public"):
    return ReviewRecord(
        id=f"rev-{i}",
        restaurant_id="r1",
        user_id=f"u{i}",
        rating=rating,
        text="text",
        review_date=days_ago(i),
        visibility=visibility,
        sentiment=sentiment,
    )


def test_no_reviews_gives_zeroes(now):
    agg = compute_aggregate_rating([], now=now)
    assert agg.overall == 0.0
    assert agg.categories == {"food": 0.0, "service": 0.0, "ambiance": 0.0, "value": 0.0}
    assert agg.review_count == 0
    assert agg.last_updated == now


@pytest.mark.parametrize("score, stars", [(-1.0, 0.0), (0.0, 2.5), (1.0, 5.0)])
def test_sentiment_to_stars(score, stars):
    assert sentiment_to_stars(score) == stars


def test_overall_is_mean_rating(days_ago, make_profile):
    reviews = [
        review(1, 5, make_profile(), days_ago),
        review(2, 4, make_profile(), days_ago),
        review(3, 4, make_profile(), days_ago),
    ]
    agg = compute_aggregate_rating(reviews)
    assert agg.overall == 4.3
    assert agg.review_count == 3


def test_null_categories_are_skipped(days_ago, make_profile):
    reviews = [
        review(1, 5, make_profile(food=1.0), days_ago),
        review(2, 3, make_profile(food=0.0, service=-1.0), days_ago),
        review(3, 4, make_profile(), days_ago),
    ]
    agg = compute_aggregate_rating(reviews)
    # food: (5.0 + 2.5) / 2
    assert agg.categories["food"] == 3.8
    assert agg.categories["service"] == 0.0
    assert agg.categories["ambiance"] == 0.0
    for v in agg.categories.values():
        assert 0.0 <= v <= 5.0


def test_recompute_reads_counted_reviews_and_saves(store, days_ago, make_profile):
    store.add_restaurant(id="r1", name="Bistro", owner_id="owner")
    store.put_review(
        id="a", restaurant_id="r1", user_id="u1", rating=5, review_date=days_ago(1),
        sentiment=make_profile(food=0.6),
    )
    store.put_review(
        id="b", restaurant_id="r1", user_id="u2", rating=1, review_date=days_ago(2),
        visibility="private", sentiment=make_profile(food=-1.0),
    )
    store.put_review(
        id="c", restaurant_id="r1", user_id="u3", rating=1, review_date=days_ago(3),
        visibility="deleted", sentiment=make_profile(food=-1.0),
    )

    agg = asyncio.run(AggregateRatingUpdater(store).recompute("r1"))

    assert agg.review_count == 1
    assert agg.overall == 5.0
    assert agg.categories["food"] == 4.0
    assert store.saved_aggregates["r1"] == agg
    assert store.restaurants["r1"].rating_overall == 5.0


def test_overall_rounds_halves_up(days_ago, make_profile):
    reviews = [review(i, r, make_profile(), days_ago) for i, r in enumerate([5, 4, 4, 4])]
    # mean 4.25
    assert compute_aggregate_rating(reviews).overall == 4.3


def test_category_stars_round_halves_up(days_ago, make_profile):
    reviews = [
        review(1, 5, make_profile(food=-1.0), days_ago),
        review(2, 5, make_profile(food=0.0), days_ago),
    ]
    # (0.0 + 2.5) / 2 = 1.25
    assert compute_aggregate_rating(reviews).categories["food"] == 1.3
