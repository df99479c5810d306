from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class Resource(BaseModel):
    id: int
    url: str

    model_config = ConfigDict(from_attributes=True)


class LessonBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    video_url: str = Field(..., min_length=1)
    order: Optional[int] = None


class LessonIn(LessonBase):
    """Lesson as submitted with a course. ``id`` identifies an existing lesson to update."""
    id: Optional[int] = None
    resources: List[str] = Field(default_factory=list)


class Lesson(LessonBase):
    id: int
    course_id: int
    order: int
    resources: List[Resource] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
