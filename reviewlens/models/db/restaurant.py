# reviewlens/models/db/restaurant.py

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from reviewlens.core.database import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(String, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    city = Column(String, nullable=False)
    country = Column(String, nullable=False, default="Philippines")
    cuisine = Column(JSON, nullable=False, default=list)  # ["Filipino", ...]
    price_range = Column(String, nullable=False)  # "₱" .. "₱₱₱₱"
    owner_id = Column(String, nullable=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Aggregate rating (derived; written only by the aggregate updater)
    rating_overall = Column(Float, default=0.0, nullable=False)
    rating_food = Column(Float, default=0.0, nullable=False)
    rating_service = Column(Float, default=0.0, nullable=False)
    rating_ambiance = Column(Float, default=0.0, nullable=False)
    rating_value = Column(Float, default=0.0, nullable=False)
    review_count = Column(Integer, default=0, nullable=False)
    rating_updated_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    reviews = relationship(
        "Review", backref="restaurant", cascade="all, delete-orphan"
    )
