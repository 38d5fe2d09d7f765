# reviewlens/models/db/review.py

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.sql import func
from reviewlens.core.database import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        # one review per user per restaurant
        UniqueConstraint("restaurant_id", "user_id", name="uq_reviews_restaurant_user"),
        Index("ix_reviews_restaurant_date", "restaurant_id", "review_date"),
    )

    id = Column(String, primary_key=True, index=True)
    restaurant_id = Column(
        String, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(String, nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1..5
    text = Column(Text, nullable=False)
    review_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # {overall, intensity, categories{...}, keywords[], sentimentPhrases[]}
    sentiment = Column(JSON, nullable=True)
    visibility = Column(String, default="public", nullable=False)  # public | private | deleted

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
