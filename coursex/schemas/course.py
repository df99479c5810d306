from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from coursex.schemas.lesson import Lesson, LessonIn
from coursex.schemas.user import UserSummary


class CourseBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    thumbnail_url: str = Field(..., min_length=1)
    intro_video_url: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    price: float = Field(default=0, ge=0)


class CourseCreate(CourseBase):
    lessons: List[LessonIn] = Field(default_factory=list)


class CourseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    thumbnail_url: Optional[str] = None
    intro_video_url: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    published: Optional[bool] = None
    lessons: Optional[List[LessonIn]] = None


class CourseSummary(BaseModel):
    id: int
    title: str
    slug: str
    thumbnail_url: Optional[str] = None
    price: float
    instructor: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)


class CourseListItem(CourseSummary):
    category: str
    description: str
    difficulty: Optional[str] = None
    published: bool
    average_rating: float = 0.0
    review_count: int = 0


class Course(CourseBase):
    id: int
    slug: str
    published: bool
    instructor_id: str
    instructor: Optional[UserSummary] = None
    lessons: List[Lesson] = Field(default_factory=list)
    average_rating: float = 0.0
    review_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CourseProgress(BaseModel):
    course_id: int
    progress: int
    completed: bool
    completed_lesson_ids: List[int] = Field(default_factory=list)


class InstructorStats(BaseModel):
    total_courses: int
    published_courses: int
    total_enrollments: int
    average_rating: float
