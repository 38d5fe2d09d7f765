from fastapi import APIRouter, Depends
import logging

from reviewlens.core.analytics.records import ReviewRecord
from reviewlens.core.sentiment.analyzer import ReviewAnalyzer
from reviewlens.messages.review_messages import (
    REVIEW_CREATED,
    REVIEW_DELETED,
    REVIEW_SAVE_FAILED,
    REVIEW_UPDATED,
)
from reviewlens.schemas.review import (
    ReviewCreateRequest,
    ReviewResponse,
    ReviewUpdateRequest,
)
from reviewlens.services.review_service import ReviewService, get_review_analyzer
from reviewlens.services.review_store import SqlReviewStore, get_review_store
from reviewlens.utils.exceptions import APIException, ServerError
from reviewlens.utils.identity import Caller, get_caller
from reviewlens.utils.response_builder import success_response

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])
logger = logging.getLogger(__name__)


def review_payload(review: ReviewRecord) -> dict:
    return {
        "id": review.id,
        "restaurantId": review.restaurant_id,
        "userId": review.user_id,
        "rating": review.rating,
        "text": review.text,
        "reviewDate": review.review_date,
        "visibility": review.visibility,
        "sentiment": review.sentiment.to_payload(),
    }


def get_review_service(
    store: SqlReviewStore = Depends(get_review_store),
    analyzer: ReviewAnalyzer = Depends(get_review_analyzer),
) -> ReviewService:
    return ReviewService(store, analyzer)


@router.post("", response_model=ReviewResponse, status_code=201)
async def create_review(
    req: ReviewCreateRequest,
    caller: Caller = Depends(get_caller),
    service: ReviewService = Depends(get_review_service),
):
    try:
        review = await service.create_review(
            caller, req.restaurant_id, req.rating, req.text
        )
        return success_response(
            message=REVIEW_CREATED, data=review_payload(review), status_code=201
        )

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Review creation failed for {req.restaurant_id}: {e}")
        raise ServerError(code="REVIEW_SAVE_FAILED", message=REVIEW_SAVE_FAILED)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    req: ReviewUpdateRequest,
    caller: Caller = Depends(get_caller),
    service: ReviewService = Depends(get_review_service),
):
    try:
        review = await service.update_review(
            caller,
            review_id,
            rating=req.rating,
            text=req.text,
            visibility=req.visibility,
        )
        return success_response(message=REVIEW_UPDATED, data=review_payload(review))

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Review update failed for {review_id}: {e}")
        raise ServerError(code="REVIEW_SAVE_FAILED", message=REVIEW_SAVE_FAILED)


@router.delete("/{review_id}")
async def delete_review(
    review_id: str,
    caller: Caller = Depends(get_caller),
    service: ReviewService = Depends(get_review_service),
):
    try:
        review = await service.delete_review(caller, review_id)
        return success_response(message=REVIEW_DELETED, data={"id": review.id})

    except APIException as e:
        raise e
    except Exception as e:
        logger.exception(f"Review deletion failed for {review_id}: {e}")
        raise ServerError(code="REVIEW_SAVE_FAILED", message=REVIEW_SAVE_FAILED)
