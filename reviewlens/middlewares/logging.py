# reviewlens/middlewares/logging.py

import logging
import sys
import requests
from reviewlens.core.config import settings

BETTERSTACK_URL = "https://in.logs.betterstack.com"


class BetterStackHandler(logging.Handler):
    """Ships formatted records to BetterStack; failures never break the request."""

    def __init__(self, api_key: str, service: str, level=logging.NOTSET):
        super().__init__(level)
        self.api_key = api_key
        self.service = service

    def emit(self, record):
        try:
            response = requests.post(
                BETTERSTACK_URL,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json={
                    "dt": record.created,
                    "level": record.levelname,
                    "service": self.service,
                    "message": self.format(record),
                },
                timeout=3,
            )
            if response.status_code >= 300:
                sys.stderr.write(f"BetterStack logging failed: {response.text}\n")
        except Exception:
            self.handleError(record)


def setup_logging():
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        betterstack_handler = BetterStackHandler(
            settings.BETTERSTACK_API_KEY, settings.SERVICE_NAME
        )
        betterstack_handler.setFormatter(formatter)
        logger.addHandler(betterstack_handler)

    # the BetterStack handler itself uses requests; keep its chatter out
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.info("✅ Logging system initialized")
