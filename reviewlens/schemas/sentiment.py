from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from reviewlens.schemas.common import BaseResponse


class AnalyzeTextRequest(BaseModel):
    text: str


class SentimentPhraseData(BaseModel):
    text: str
    sentiment: Literal["positive", "negative"]
    score: float


class CategoryScores(BaseModel):
    food: Optional[float] = None
    service: Optional[float] = None
    ambiance: Optional[float] = None
    value: Optional[float] = None


class SentimentProfileData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall: float = Field(ge=-1, le=1)
    intensity: Literal["neutral", "mild", "moderate", "strong"]
    categories: CategoryScores
    keywords: List[str] = Field(max_length=10)
    sentiment_phrases: List[SentimentPhraseData] = Field(
        alias="sentimentPhrases", max_length=6
    )


class AnalyzeTextData(BaseModel):
    source: Literal["external", "local"]
    sentiment: SentimentProfileData


class AnalyzeTextResponse(BaseResponse):
    data: AnalyzeTextData
