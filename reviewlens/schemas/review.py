from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from reviewlens.schemas.common import BaseResponse
from reviewlens.schemas.sentiment import SentimentProfileData


class ReviewCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_id: str = Field(alias="restaurantId")
    rating: int
    text: str


class ReviewUpdateRequest(BaseModel):
    rating: Optional[int] = None
    text: Optional[str] = None
    visibility: Optional[str] = None  # public | private


class ReviewData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    restaurant_id: str = Field(alias="restaurantId")
    user_id: Optional[str] = Field(default=None, alias="userId")
    rating: int
    text: str
    review_date: datetime = Field(alias="reviewDate")
    visibility: str
    sentiment: SentimentProfileData


class ReviewResponse(BaseResponse):
    data: ReviewData
