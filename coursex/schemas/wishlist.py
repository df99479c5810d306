from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from coursex.schemas.course import CourseSummary


class WishlistItemCreate(BaseModel):
    course_id: int


class WishlistItem(BaseModel):
    id: int
    course_id: int
    created_at: Optional[datetime] = None
    course: Optional[CourseSummary] = None

    model_config = ConfigDict(from_attributes=True)
