from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from reviewlens.schemas.common import BaseResponse
from reviewlens.schemas.sentiment import CategoryScores, SentimentPhraseData


class SentimentDistribution(BaseModel):
    positive: float
    neutral: float
    negative: float


class KeywordCount(BaseModel):
    keyword: str
    count: int


class RepresentativePhrases(BaseModel):
    positive: List[SentimentPhraseData]
    negative: List[SentimentPhraseData]


class TrendPoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    period: str  # YYYY-MM
    avg_sentiment: float = Field(alias="avgSentiment")
    avg_rating: float = Field(alias="avgRating")
    review_count: int = Field(alias="reviewCount")


class RestaurantSentimentData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    period_label: str = Field(alias="periodLabel")
    overall_sentiment: float = Field(alias="overallSentiment")
    categories: CategoryScores
    sentiment_distribution: SentimentDistribution = Field(alias="sentimentDistribution")
    rating_distribution: Dict[int, int] = Field(alias="ratingDistribution")
    keywords: List[KeywordCount]
    sentiment_phrases: RepresentativePhrases = Field(alias="sentimentPhrases")
    trends: List[TrendPoint]


class RestaurantSentimentResponse(BaseResponse):
    data: RestaurantSentimentData


class ImprovementArea(BaseModel):
    category: str
    count: int
    percentage: float


class CommonIssue(BaseModel):
    issue: str
    count: int
    percentage: float


class ReviewExample(BaseModel):
    id: str
    text: str
    rating: float
    date: datetime
    sentiment: Optional[float] = None


class ImprovementData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    improvement_areas: List[ImprovementArea] = Field(alias="improvementAreas")
    common_issues: Dict[str, List[CommonIssue]] = Field(alias="commonIssues")
    suggestions_by_category: Dict[str, List[str]] = Field(alias="suggestionsByCategory")
    review_count: int = Field(alias="reviewCount")
    review_examples: Dict[str, List[ReviewExample]] = Field(alias="reviewExamples")


class ImprovementResponse(BaseResponse):
    data: ImprovementData


class ComparisonItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    cuisine: List[str]
    price_range: Optional[str] = Field(default=None, alias="priceRange")
    location: Optional[str] = None
    score: float
    review_count: int = Field(alias="reviewCount")


class ComparisonData(BaseModel):
    category: str
    restaurants: List[ComparisonItem]


class ComparisonResponse(BaseResponse):
    data: ComparisonData
