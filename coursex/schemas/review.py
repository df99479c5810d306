from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from coursex.schemas.user import UserSummary


class ReviewCreate(BaseModel):
    course_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class Review(BaseModel):
    id: int
    user_id: str
    course_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)
