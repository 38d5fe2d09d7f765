from fastapi import APIRouter, Depends, Query
import logging

from reviewlens.core.config import settings
from reviewlens.core.sentiment.analyzer import ReviewAnalyzer
from reviewlens.messages.analysis_messages import (
    ANALYSIS_FAILED,
    COMPARISON_SUCCESS,
    IMPROVEMENTS_SUCCESS,
    NO_NEGATIVE_REVIEWS,
    RESTAURANT_SENTIMENT_SUCCESS,
    SENTIMENT_ANALYSIS_SUCCESS,
)
from reviewlens.schemas.analytics import (
    ComparisonResponse,
    ImprovementResponse,
    RestaurantSentimentResponse,
)
from reviewlens.schemas.sentiment import AnalyzeTextRequest, AnalyzeTextResponse
from reviewlens.services.analytics_service import AnalyticsService
from reviewlens.services.review_service import get_review_analyzer, validate_text
from reviewlens.services.review_store import SqlReviewStore, get_review_store
from reviewlens.utils.exceptions import APIException, ServerError
from reviewlens.utils.identity import Caller, get_caller
from reviewlens.utils.response_builder import success_response

router = APIRouter(prefix="/api/analysis", tags=["Analysis"])
logger = logging.getLogger(__name__)


@router.get(
    "/restaurant/{restaurant_id}/sentiment",
    response_model=RestaurantSentimentResponse,
)
async def restaurant_sentiment(
    restaurant_id: str,
    period: str = Query(default="6months"),
    store: SqlReviewStore = Depends(get_review_store),
):
    try:
        data = await AnalyticsService(store).restaurant_sentiment(restaurant_id, period)
        return success_response(message=RESTAURANT_SENTIMENT_SUCCESS, data=data)

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Restaurant sentiment failed for {restaurant_id}: {e}")
        raise ServerError(code="RESTAURANT_SENTIMENT_FAILED", message=ANALYSIS_FAILED)


@router.get(
    "/restaurant/{restaurant_id}/improvements",
    response_model=ImprovementResponse,
)
async def restaurant_improvements(
    restaurant_id: str,
    caller: Caller = Depends(get_caller),
    store: SqlReviewStore = Depends(get_review_store),
):
    try:
        data = await AnalyticsService(store).improvements(restaurant_id, caller)
        message = IMPROVEMENTS_SUCCESS if data["reviewCount"] else NO_NEGATIVE_REVIEWS
        return success_response(message=message, data=data)

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Improvement suggestions failed for {restaurant_id}: {e}")
        raise ServerError(code="IMPROVEMENTS_FAILED", message=ANALYSIS_FAILED)


@router.get("/restaurants/compare", response_model=ComparisonResponse)
async def compare_restaurants(
    ids: str = Query(default=""),
    category: str = Query(default="overall"),
    store: SqlReviewStore = Depends(get_review_store),
):
    try:
        data = await AnalyticsService(store).compare(ids, category)
        return success_response(message=COMPARISON_SUCCESS, data=data)

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Restaurant comparison failed for ids={ids}: {e}")
        raise ServerError(code="COMPARISON_FAILED", message=ANALYSIS_FAILED)


@router.post("/text", response_model=AnalyzeTextResponse)
async def analyze_text(
    req: AnalyzeTextRequest,
    analyzer: ReviewAnalyzer = Depends(get_review_analyzer),
):
    try:
        text = validate_text(req.text, settings.MIN_REVIEW_LENGTH)
        outcome = await analyzer.analyze_with_source(text)
        return success_response(
            message=SENTIMENT_ANALYSIS_SUCCESS,
            data={"source": outcome.source, "sentiment": outcome.profile.to_payload()},
        )

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Text analysis failed: {e}")
        raise ServerError(code="SENTIMENT_ANALYSIS_FAILED", message=ANALYSIS_FAILED)
