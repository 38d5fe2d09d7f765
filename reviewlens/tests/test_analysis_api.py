from datetime import datetime, timedelta, timezone

import pytest

OWNER = {"X-User-Id": "owner-1", "X-User-Role": "restaurant-owner"}
STRANGER = {"X-User-Id": "someone", "X-User-Role": "restaurant-owner"}
ADMIN = {"X-User-Id": "admin-1", "X-User-Role": "admin"}


def recent(days: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


@pytest.fixture
def seeded(store, make_profile):
    store.add_restaurant(
        id="r1", name="Bistro", owner_id="owner-1", city="Lisbon",
        cuisine=("portuguese",), price_range="$$", rating_overall=4.2,
        rating_categories={"food": 4.5, "service": 3.0}, review_count=12,
    )
    store.add_restaurant(
        id="r2", name="Cantina", owner_id="owner-2", city="Porto",
        rating_overall=3.1, rating_categories={"food": 4.8}, review_count=4,
    )
    store.add_restaurant(id="r3", name="Closed", owner_id="owner-3", is_active=False)

    store.put_review(
        id="a", restaurant_id="r1", user_id="u1", rating=5, review_date=recent(3),
        text="Great food.", sentiment=make_profile(0.8, food=0.9, keywords=["food"]),
    )
    store.put_review(
        id="b", restaurant_id="r1", user_id="u2", rating=2, review_date=recent(20),
        text="The waiter was rude.",
        sentiment=make_profile(-0.6, service=-0.7, keywords=["waiter", "rude"]),
    )
    store.put_review(
        id="c", restaurant_id="r1", user_id="u3", rating=1, review_date=recent(60),
        text="Hidden review.", visibility="private", sentiment=make_profile(-0.9),
    )
    return store


# ----------------------------
# Sentiment dashboard
# ----------------------------


def test_sentiment_default_period(client, seeded):
    response = client.get("/api/analysis/restaurant/r1/sentiment")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["periodLabel"] == "Last 6 months"
    # private reviews are not counted
    assert data["total"] == 2
    assert data["ratingDistribution"] == {"1": 0, "2": 1, "3": 0, "4": 0, "5": 1}
    assert data["sentimentDistribution"] == {
        "positive": 50.0,
        "neutral": 0.0,
        "negative": 50.0,
    }


def test_sentiment_short_period_filters_window(client, seeded):
    data = client.get(
        "/api/analysis/restaurant/r1/sentiment", params={"period": "30days"}
    ).json()["data"]
    assert data["total"] == 2

    data = client.get(
        "/api/analysis/restaurant/r2/sentiment", params={"period": "30days"}
    ).json()["data"]
    assert data["total"] == 0
    assert data["trends"] == []


def test_sentiment_invalid_period(client, seeded):
    response = client.get(
        "/api/analysis/restaurant/r1/sentiment", params={"period": "2weeks"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PERIOD"


def test_sentiment_unknown_restaurant(client, seeded):
    response = client.get("/api/analysis/restaurant/nope/sentiment")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESTAURANT_NOT_FOUND"


# ----------------------------
# Improvements
# ----------------------------


def test_improvements_requires_identity(client, seeded):
    response = client.get("/api/analysis/restaurant/r1/improvements")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


def test_improvements_forbidden_before_any_review_is_loaded(client, seeded):
    response = client.get("/api/analysis/restaurant/r1/improvements", headers=STRANGER)
    assert response.status_code == 403
    assert seeded.review_queries == 0


def test_improvements_for_owner(client, seeded):
    response = client.get("/api/analysis/restaurant/r1/improvements", headers=OWNER)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["reviewCount"] == 1
    assert data["improvementAreas"][0]["category"] == "service"
    assert data["reviewExamples"]["service"][0]["id"] == "b"


def test_improvements_for_admin_with_nothing_negative(client, seeded):
    response = client.get("/api/analysis/restaurant/r2/improvements", headers=ADMIN)
    assert response.status_code == 200
    assert response.json()["data"] == {
        "improvementAreas": [],
        "commonIssues": {},
        "suggestionsByCategory": {},
        "reviewCount": 0,
        "reviewExamples": {},
    }


def test_improvements_unknown_restaurant(client, seeded):
    response = client.get("/api/analysis/restaurant/nope/improvements", headers=ADMIN)
    assert response.status_code == 404


# ----------------------------
# Compare
# ----------------------------


def test_compare_ranks_by_category(client, seeded):
    response = client.get(
        "/api/analysis/restaurants/compare", params={"ids": "r1,r2", "category": "food"}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["category"] == "food"
    assert [(r["id"], r["score"]) for r in data["restaurants"]] == [
        ("r2", 4.8),
        ("r1", 4.5),
    ]
    assert data["restaurants"][1]["location"] == "Lisbon"


def test_compare_unknown_category_uses_overall(client, seeded):
    data = client.get(
        "/api/analysis/restaurants/compare", params={"ids": "r1,r2", "category": "parking"}
    ).json()["data"]
    assert data["category"] == "overall"
    assert data["restaurants"][0]["id"] == "r1"


@pytest.mark.parametrize("ids", ["", "r1", "r1,r1", "a,b,c,d,e,f"])
def test_compare_needs_two_to_five_ids(client, seeded, ids):
    response = client.get("/api/analysis/restaurants/compare", params={"ids": ids})
    assert response.status_code == 400


@pytest.mark.parametrize("ids", ["r1,missing", "r1,r3"])
def test_compare_unknown_or_inactive_restaurant(client, seeded, ids):
    response = client.get("/api/analysis/restaurants/compare", params={"ids": ids})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESTAURANTS_NOT_FOUND"


# ----------------------------
# Ad-hoc text analysis
# ----------------------------


def test_analyze_text(client):
    response = client.post(
        "/api/analysis/text",
        json={"text": "The food was absolutely delicious! The service was prompt and friendly."},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["source"] == "local"
    assert data["sentiment"]["intensity"] == "strong"
    assert data["sentiment"]["categories"]["ambiance"] is None


def test_analyze_text_too_short(client):
    response = client.post("/api/analysis/text", json={"text": "   ok   "})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "REVIEW_TEXT_TOO_SHORT"


def test_analyze_text_works_without_database(client):
    from reviewlens.main import app
    from reviewlens.services.review_store import get_review_store

    def unavailable():
        raise RuntimeError("database unavailable")

    app.dependency_overrides[get_review_store] = unavailable
    response = client.post(
        "/api/analysis/text", json={"text": "Rude staff and overpriced food."}
    )
    assert response.status_code == 200
    assert response.json()["data"]["sentiment"]["overall"] < 0


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/liveness").status_code == 204
