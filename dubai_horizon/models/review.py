# dubai_horizon/models/review.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4


class ReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Star rating from 1 to 5")
    comment: Optional[str] = Field(None, max_length=1000)


class Review(ReviewCreate):
    id: UUID = Field(default_factory=uuid4)
    destination_id: UUID
    user_id: UUID
    user_name: str
    created_at: datetime = Field(default_factory=datetime.now)
