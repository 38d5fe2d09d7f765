from locust import HttpUser, task, between
import os
import random

# Seeded restaurant ids to exercise; comma separated
RESTAURANT_IDS = [
    rid.strip()
    for rid in os.getenv("LOAD_RESTAURANT_IDS", "r1,r2,r3").split(",")
    if rid.strip()
]
PERIODS = ["30days", "90days", "6months", "1year", "all"]

SAMPLE_REVIEWS = [
    "The food was absolutely delicious! The service was prompt and friendly.",
    "Waited forever, the waiter was rude and the bill was overpriced.",
    "Cozy place with decent pasta, a bit loud on weekends.",
]


class DashboardUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def restaurant_sentiment(self):
        rid = random.choice(RESTAURANT_IDS)
        self.client.get(
            f"/api/analysis/restaurant/{rid}/sentiment",
            params={"period": random.choice(PERIODS)},
            name="/api/analysis/restaurant/[id]/sentiment",
        )

    @task(1)
    def compare(self):
        ids = random.sample(RESTAURANT_IDS, k=min(len(RESTAURANT_IDS), 3))
        self.client.get(
            "/api/analysis/restaurants/compare",
            params={"ids": ",".join(ids), "category": "food"},
        )

    @task(1)
    def analyze_text(self):
        self.client.post(
            "/api/analysis/text", json={"text": random.choice(SAMPLE_REVIEWS)}
        )
